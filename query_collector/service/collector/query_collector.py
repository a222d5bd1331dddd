"""
ORM logger that doubles as a data collector.

Query-execution lines are parsed and recorded for the SQL queries widget,
everything else is forwarded to an optional downstream logger.

Example:
    messages = MessagesCollector()
    profiling = enable_profiling(ProfilingConfiguration())
    collector = QueryCollector(messages).bind(connection)
    ...
    summary = collector.collect()
"""
from typing import Any, Callable, Dict, Optional, Sequence

from query_collector.config.collector_config import CollectorConfig, DEFAULT_QUERY_MARKER
from query_collector.config.profiling_config import ProfilingConfiguration, is_profiling_enabled
from query_collector.consts.LogLevel import DEFAULT_SOURCE_LEVEL, SourceLogLevel, convert_log_level
from query_collector.models.trace_frame import TraceFrame
from query_collector.service.caller_resolver.caller_resolver import CallerResolver
from query_collector.service.collector.downstream import DownstreamLogger
from query_collector.service.recorder.statement_recorder import StatementRecorder
from query_collector.util.log_config import setup_logger

logger = setup_logger(__name__)

COLLECTOR_NAME = "propel"


class QueryCollector:

    def __init__(self,
                 logger: Optional[DownstreamLogger] = None,
                 resolver: Optional[CallerResolver] = None,
                 query_marker: str = DEFAULT_QUERY_MARKER,
                 recorder: Optional[StatementRecorder] = None):
        """
        Args:
            logger: Logger to forward non-query messages to
            resolver: Call-site resolver used for new statements
            query_marker: Substring that identifies query-execution lines
            recorder: Pre-built recorder, takes precedence over resolver
        """
        self.logger = logger
        self.query_marker = query_marker
        self.recorder = recorder or StatementRecorder(resolver=resolver)
        self.log_queries_to_logger = False

    @classmethod
    def from_config(cls,
                    config: CollectorConfig,
                    profiling: Optional[ProfilingConfiguration] = None,
                    downstream: Optional[DownstreamLogger] = None,
                    trace_provider: Optional[Callable[[], Sequence[TraceFrame]]] = None) -> 'QueryCollector':
        """
        Build a collector from loaded configuration.

        The class map of the profiling configuration, when given, replaces
        the one from the collector configuration. trace_provider replaces
        the live call-stack capture, e.g. for lines replayed from a file.
        """
        class_map = config.class_map
        if profiling is not None:
            if not is_profiling_enabled(profiling):
                logger.warning("ORM profiling is not enabled, query lines will lack time/memory details")
            class_map = profiling.class_map()

        resolver = CallerResolver(
            class_map=class_map,
            document_root=config.document_root,
            vendor_markers=config.vendor_markers,
        )
        recorder = None
        if trace_provider is not None:
            recorder = StatementRecorder(resolver=resolver, trace_provider=trace_provider)
        collector = cls(logger=downstream, resolver=resolver, query_marker=config.query_marker,
                        recorder=recorder)
        collector.set_log_queries_to_logger(config.log_queries_to_logger)
        return collector

    def bind(self, owner: Any) -> 'QueryCollector':
        """Hand this collector to the object owning the database connection."""
        owner.set_logger(self)
        return self

    def set_log_queries_to_logger(self, enable: bool = True) -> 'QueryCollector':
        self.log_queries_to_logger = enable
        return self

    def is_log_queries_to_logger(self) -> bool:
        return self.log_queries_to_logger

    def emergency(self, message: str) -> None:
        self.log(message, SourceLogLevel.EMERG)

    def alert(self, message: str) -> None:
        self.log(message, SourceLogLevel.ALERT)

    def crit(self, message: str) -> None:
        self.log(message, SourceLogLevel.CRIT)

    def err(self, message: str) -> None:
        self.log(message, SourceLogLevel.ERR)

    def warning(self, message: str) -> None:
        self.log(message, SourceLogLevel.WARNING)

    def notice(self, message: str) -> None:
        self.log(message, SourceLogLevel.NOTICE)

    def info(self, message: str) -> None:
        self.log(message, SourceLogLevel.INFO)

    def debug(self, message: str) -> None:
        self.log(message, SourceLogLevel.DEBUG)

    def log(self, message: str, severity: Optional[SourceLogLevel] = None) -> None:
        """
        Entry point for every ORM log event.

        Args:
            message: Log line
            severity: ORM severity, DEBUG when omitted

        Raises:
            UnmappedLogLevelError: If the severity cannot be translated
        """
        if severity is None:
            severity = DEFAULT_SOURCE_LEVEL

        if self.query_marker in message:
            sql, duration_str = self.recorder.record(message)
            if not self.log_queries_to_logger:
                return
            message = f"{sql} ({duration_str})"

        if self.logger is not None:
            self.logger.log(convert_log_level(severity), message)

    def collect(self) -> Dict[str, Any]:
        """Snapshot of the statement log and its aggregates."""
        return self.recorder.state.snapshot().to_dict()

    def get_name(self) -> str:
        return COLLECTOR_NAME

    def get_widgets(self) -> Dict[str, Dict[str, Any]]:
        return {
            COLLECTOR_NAME: {
                "icon": "bolt",
                "widget": "PhpDebugBar.Widgets.SQLQueriesWidget",
                "map": COLLECTOR_NAME,
                "default": "[]",
            },
            f"{COLLECTOR_NAME}:badge": {
                "map": f"{COLLECTOR_NAME}.nb_statements",
                "default": 0,
            },
        }

    def get_assets(self) -> Dict[str, str]:
        return {
            'css': 'widgets/sqlqueries/widget.css',
            'js': 'widgets/sqlqueries/widget.js',
        }
