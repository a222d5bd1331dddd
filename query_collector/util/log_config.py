"""
Logging configuration for the query collector.

Provides centralized logging setup with clean, concise terminal output.
The QUERY_COLLECTOR_LOG_LEVEL environment variable overrides the level
passed by callers (e.g. QUERY_COLLECTOR_LOG_LEVEL=DEBUG).
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional

LOG_LEVEL_ENV = "QUERY_COLLECTOR_LOG_LEVEL"


def _level_from_env(default: int) -> int:
    name = os.environ.get(LOG_LEVEL_ENV)
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: INFO)
        log_file: Optional file path for log output

    Returns:
        Configured logger instance
    """
    level = _level_from_env(level)
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Close and remove existing handlers, file handlers would otherwise stay open
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    # Clean format: [LEVEL] message
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt='[%(levelname)s] %(message)s'))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def configure_package_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> None:
    """Re-apply level and file output to every query_collector logger already created."""
    manager = logging.Logger.manager
    for name in list(manager.loggerDict):
        if name == "query_collector" or name.startswith("query_collector."):
            setup_logger(name, level=level, log_file=log_file)
