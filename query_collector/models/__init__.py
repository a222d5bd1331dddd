"""Models for collected query data structures."""

from .trace_frame import TraceFrame
from .caller_info import CallerInfo, FileInfo
from .statement_record import ParsedQuery, StatementRecord
from .collected_summary import CollectedSummary

__all__ = ["TraceFrame", "CallerInfo", "FileInfo", "ParsedQuery", "StatementRecord", "CollectedSummary"]
