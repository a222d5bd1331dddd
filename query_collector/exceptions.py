# =============================================================================
# Custom Exceptions for the query collector
# =============================================================================

class QueryCollectorError(Exception):
    """Base exception class for the query collector."""
    pass

class UnmappedLogLevelError(QueryCollectorError, ValueError):
    """Raised when a severity level has no translation entry."""

    def __init__(self, level):
        self.level = level
        super().__init__(f"No log level mapping for severity {level!r}")

class ConfigurationError(QueryCollectorError):
    """Raised when configuration is invalid."""
    pass
