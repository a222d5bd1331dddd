"""
Loggers the collector can forward messages to.
"""
import logging
import time
from typing import Any, Dict, List

from query_collector.consts.LogLevel import LogLevel

STDLIB_LEVELS = {
    LogLevel.EMERGENCY: logging.CRITICAL,
    LogLevel.ALERT: logging.CRITICAL,
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.NOTICE: logging.INFO,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


class DownstreamLogger:
    def log(self, level: LogLevel, message: str) -> None:
        raise NotImplementedError("Subclasses should implement this method.")


class StdlibLoggerBridge(DownstreamLogger):
    """Forward to a logging.Logger"""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def log(self, level: LogLevel, message: str) -> None:
        self.logger.log(STDLIB_LEVELS[LogLevel(level)], message)


class MessagesCollector(DownstreamLogger):
    """Keeps forwarded messages in memory for display next to the queries"""

    def __init__(self, name: str = "messages"):
        self.name = name
        self.messages: List[Dict[str, Any]] = []

    def log(self, level: LogLevel, message: str) -> None:
        self.messages.append({
            'message': message,
            'label': LogLevel(level).value,
            'time': time.time(),
        })

    def collect(self) -> Dict[str, Any]:
        return {
            'count': len(self.messages),
            'messages': list(self.messages),
        }

    def clear(self) -> None:
        self.messages.clear()
