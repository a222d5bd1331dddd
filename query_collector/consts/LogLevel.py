from enum import Enum, IntEnum

from query_collector.exceptions import UnmappedLogLevelError


class SourceLogLevel(IntEnum):
    """Severity scale used by the ORM logger (syslog numbering)"""
    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


class LogLevel(str, Enum):
    EMERGENCY = "emergency"
    ALERT = "alert"
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"
    DEBUG = "debug"


# DebugPDO writes its query lines at this level when none is given
DEFAULT_SOURCE_LEVEL = SourceLogLevel.DEBUG

LEVEL_MAP = {
    SourceLogLevel.EMERG: LogLevel.EMERGENCY,
    SourceLogLevel.ALERT: LogLevel.ALERT,
    SourceLogLevel.CRIT: LogLevel.CRITICAL,
    SourceLogLevel.ERR: LogLevel.ERROR,
    SourceLogLevel.WARNING: LogLevel.WARNING,
    SourceLogLevel.NOTICE: LogLevel.NOTICE,
    SourceLogLevel.INFO: LogLevel.INFO,
    SourceLogLevel.DEBUG: LogLevel.DEBUG,
}

_missing = [level.name for level in SourceLogLevel if level not in LEVEL_MAP]
if _missing:
    raise RuntimeError(f"LEVEL_MAP has no entry for: {', '.join(_missing)}")
if len(set(LEVEL_MAP.values())) != len(LEVEL_MAP):
    raise RuntimeError("LEVEL_MAP must map source levels one-to-one")


def convert_log_level(level) -> LogLevel:
    """
    Translate an ORM severity into the standard severity scale.

    Args:
        level: SourceLogLevel member or its integer value

    Returns:
        The matching LogLevel

    Raises:
        UnmappedLogLevelError: If the level has no entry in LEVEL_MAP
    """
    # bool is an int subclass but never a severity
    if isinstance(level, bool) or not isinstance(level, int):
        raise UnmappedLogLevelError(level)
    try:
        return LEVEL_MAP[SourceLogLevel(level)]
    except (ValueError, KeyError):
        raise UnmappedLogLevelError(level) from None
