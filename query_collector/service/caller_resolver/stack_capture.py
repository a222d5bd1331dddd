"""
Snapshot of the Python call stack as TraceFrame entries.
"""
import sys
from typing import Iterable, List, Optional

from query_collector.models.trace_frame import TraceFrame

COLLECTOR_PACKAGE = "query_collector"


def _declaring_class(code) -> Optional[str]:
    # 'BaseBook.save' -> 'BaseBook', 'outer.<locals>.inner' -> None
    parts = code.co_qualname.split('.')
    if len(parts) < 2 or parts[-2] == '<locals>':
        return None
    return parts[-2]


def _is_skipped_module(module_name: str, skip_modules: Iterable[str]) -> bool:
    return any(module_name == m or module_name.startswith(m + '.') for m in skip_modules)


def capture_trace(skip_modules: Iterable[str] = (COLLECTOR_PACKAGE,)) -> List[TraceFrame]:
    """
    Capture the current call stack, innermost frame first.

    Args:
        skip_modules: Top-level modules/packages whose frames are left out

    Returns:
        List of TraceFrame
    """
    skip_modules = tuple(skip_modules)
    frames = []
    frame = sys._getframe(1)
    while frame is not None:
        module_name = frame.f_globals.get('__name__', '')
        if not _is_skipped_module(module_name, skip_modules):
            code = frame.f_code
            class_name = _declaring_class(code)
            call_type = None
            if class_name is not None:
                call_type = '->' if code.co_argcount and code.co_varnames[0] == 'self' else '::'
            frames.append(TraceFrame(
                file=code.co_filename,
                line=frame.f_lineno,
                function=code.co_name,
                class_name=class_name,
                call_type=call_type,
            ))
        frame = frame.f_back
    return frames
