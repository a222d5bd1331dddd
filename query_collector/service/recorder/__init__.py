from .statement_recorder import AggregateState, StatementRecorder

__all__ = ["AggregateState", "StatementRecorder"]
