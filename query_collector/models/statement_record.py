"""Statement data models."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from query_collector.models.caller_info import CallerInfo


@dataclass
class ParsedQuery:
    """Fields extracted from one query-execution log line"""
    sql: str = ""
    duration: float = 0.0  # seconds
    memory: float = 0.0  # bytes


@dataclass(frozen=True)
class StatementRecord:
    """
    Represents one executed statement.

    Records are immutable once appended to the collector's log.
    """
    sql: str
    duration: float
    duration_str: str
    memory: float
    memory_str: str
    caller: Optional[CallerInfo] = None
    is_success: bool = True

    @property
    def caller_label(self) -> Optional[str]:
        return self.caller.info if self.caller else None

    @property
    def caller_message(self) -> Optional[str]:
        return self.caller.message if self.caller else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the dictionary shape consumed by the SQL queries widget."""
        return {
            'sql': self.sql,
            'is_success': self.is_success,
            'duration': self.duration,
            'duration_str': self.duration_str,
            'memory': self.memory,
            'memory_str': self.memory_str,
            'caller': self.caller_label,
            'caller_str': self.caller_message,
        }
