from dataclasses import dataclass, field
from typing import Any, Dict, List

from query_collector.models.statement_record import StatementRecord


@dataclass
class CollectedSummary:
    """Point-in-time snapshot of everything the collector has recorded"""
    nb_statements: int
    accumulated_duration: float
    accumulated_duration_str: str
    peak_memory_usage: float
    peak_memory_usage_str: str
    statements: List[StatementRecord] = field(default_factory=list)
    # failures never reach the log stream
    nb_failed_statements: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'nb_statements': self.nb_statements,
            'nb_failed_statements': self.nb_failed_statements,
            'accumulated_duration': self.accumulated_duration,
            'accumulated_duration_str': self.accumulated_duration_str,
            'peak_memory_usage': self.peak_memory_usage,
            'peak_memory_usage_str': self.peak_memory_usage_str,
            'statements': [s.to_dict() for s in self.statements],
        }
