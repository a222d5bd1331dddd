from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from query_collector.models.collected_summary import CollectedSummary
from query_collector.models.statement_record import StatementRecord
from query_collector.models.trace_frame import TraceFrame
from query_collector.service.caller_resolver.caller_resolver import CallerResolver
from query_collector.service.caller_resolver.stack_capture import capture_trace
from query_collector.service.log_parser.query_log_parser import QueryLogParser
from query_collector.util.format_utils import format_bytes, format_duration
from query_collector.util.log_config import setup_logger

logger = setup_logger(__name__)


@dataclass
class AggregateState:
    """Running totals, mutated only by StatementRecorder.record"""
    statements: List[StatementRecord] = field(default_factory=list)
    accumulated_duration: float = 0.0
    peak_memory: float = 0.0

    def snapshot(self) -> CollectedSummary:
        return CollectedSummary(
            nb_statements=len(self.statements),
            accumulated_duration=self.accumulated_duration,
            accumulated_duration_str=format_duration(self.accumulated_duration),
            peak_memory_usage=self.peak_memory,
            peak_memory_usage_str=format_bytes(self.peak_memory),
            statements=list(self.statements),
        )


class StatementRecorder:
    """
    Turns query-execution log lines into StatementRecords.

    Not thread-safe: use one recorder per request, or serialize calls to
    record() and the state snapshot.
    """

    def __init__(self,
                 resolver: Optional[CallerResolver] = None,
                 parser: Optional[QueryLogParser] = None,
                 trace_provider: Callable[[], Sequence[TraceFrame]] = capture_trace):
        self.resolver = resolver or CallerResolver()
        self.parser = parser or QueryLogParser()
        self.trace_provider = trace_provider
        self.state = AggregateState()

    def record(self, message: str, trace: Optional[Sequence[TraceFrame]] = None) -> Tuple[str, str]:
        """
        Parse a query log line and append it to the statement log.

        Args:
            message: Raw query-execution log line
            trace: Call stack to attribute the query to. Captured from the
                   current stack when omitted.

        Returns:
            (sql, formatted duration)
        """
        parsed = self.parser.parse(message)
        if trace is None:
            trace = self.trace_provider()
        caller = self.resolver.resolve(trace)

        duration_str = format_duration(parsed.duration)
        record = StatementRecord(
            sql=parsed.sql,
            duration=parsed.duration,
            duration_str=duration_str,
            memory=parsed.memory,
            memory_str=format_bytes(parsed.memory),
            caller=caller,
        )

        self.state.statements.append(record)
        self.state.accumulated_duration += parsed.duration
        self.state.peak_memory = max(self.state.peak_memory, parsed.memory)

        logger.debug(f"Recorded statement #{len(self.state.statements)} "
                     f"({duration_str}, {record.memory_str}) from {record.caller_label or 'unknown caller'}")
        return parsed.sql, duration_str
