from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TraceFrame:
    """Single call-stack entry, innermost frames come first in a trace"""
    file: Optional[str] = None
    line: Optional[int] = None
    function: Optional[str] = None
    class_name: Optional[str] = None  # declaring type
    call_type: Optional[str] = None  # '->' for instance calls, '::' otherwise
