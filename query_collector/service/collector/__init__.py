from .downstream import DownstreamLogger, MessagesCollector, StdlibLoggerBridge
from .query_collector import QueryCollector

__all__ = ["DownstreamLogger", "MessagesCollector", "StdlibLoggerBridge", "QueryCollector"]
