"""Collects ORM query log lines into a diagnostics summary."""

from .service.collector.query_collector import QueryCollector
from .service.collector.downstream import DownstreamLogger, MessagesCollector, StdlibLoggerBridge
from .config.profiling_config import ProfilingConfiguration, enable_profiling

__all__ = [
    "QueryCollector",
    "DownstreamLogger",
    "MessagesCollector",
    "StdlibLoggerBridge",
    "ProfilingConfiguration",
    "enable_profiling",
]
