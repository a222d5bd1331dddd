"""Configuration module for the query collector."""

from .collector_config import CollectorConfig
from .profiling_config import ProfilingConfiguration, enable_profiling

__all__ = ["CollectorConfig", "ProfilingConfiguration", "enable_profiling"]
