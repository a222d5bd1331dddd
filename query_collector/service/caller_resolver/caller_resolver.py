"""
Call-Site Resolver Module

Walks a call stack and attributes a query to the application code that
issued it. Generated base classes, the query builder and vendor code are
skipped so the reported caller is the first frame a developer owns.
"""
import os
from typing import Iterable, Mapping, Optional, Sequence

from query_collector.config.collector_config import DEFAULT_VENDOR_MARKERS
from query_collector.models.caller_info import CallerInfo, FileInfo
from query_collector.models.trace_frame import TraceFrame
from query_collector.util.file_utils import relative_file

BASE_CLASS_DIR = os.sep + 'om' + os.sep + 'Base'
QUERY_BUILDER_CLASS = 'ModelCriteria'
BASE_CLASS_PREFIX = 'Base'
DEFAULT_CALL_TYPE = '->'


class CallerResolver:
    """Finds the first call-stack frame that belongs to the application"""

    def __init__(self,
                 class_map: Optional[Mapping[str, object]] = None,
                 document_root: Optional[str] = None,
                 vendor_markers: Optional[Iterable[str]] = None):
        """
        Args:
            class_map: Classes that belong to the application, keyed by name.
                       Vendor frames are kept only for these classes.
            document_root: Web document root used for relative paths
            vendor_markers: Path fragments identifying dependency directories
        """
        self.class_map = dict(class_map or {})
        self.document_root = document_root
        self.vendor_markers = list(vendor_markers) if vendor_markers is not None else list(DEFAULT_VENDOR_MARKERS)

    def _is_vendor_file(self, file: str) -> bool:
        return any(marker in file for marker in self.vendor_markers)

    def should_skip(self, trace: Sequence[TraceFrame], index: int) -> bool:
        """
        Apply the skip rules to trace[index], first matching rule wins.
        """
        frame = trace[index]

        # generated base class file
        if frame.file is not None and BASE_CLASS_DIR in frame.file:
            return True

        # query builder
        if frame.class_name == QUERY_BUILDER_CLASS:
            return True

        # BaseBook called from Book: attribute to the derived class frame
        if frame.class_name is not None and frame.class_name.startswith(BASE_CLASS_PREFIX):
            if index + 1 < len(trace):
                outer = trace[index + 1]
                if outer.class_name is not None and BASE_CLASS_PREFIX + outer.class_name == frame.class_name:
                    return True

        # vendor class not mapped to the application
        if frame.class_name is not None and frame.file is not None and self._is_vendor_file(frame.file):
            if frame.class_name not in self.class_map:
                return True

        return False

    @staticmethod
    def describe_function(frame: TraceFrame) -> str:
        if not frame.class_name and not frame.function:
            return 'unknown'
        return (frame.class_name or '') + (frame.call_type or DEFAULT_CALL_TYPE) + (frame.function or '')

    def file_info(self, frame: TraceFrame) -> FileInfo:
        if frame.file is None or frame.line is None:
            return FileInfo()
        return FileInfo(
            basename=os.path.basename(frame.file),
            file=relative_file(frame.file, self.document_root),
            line=frame.line,
        )

    def resolve(self, trace: Sequence[TraceFrame]) -> Optional[CallerInfo]:
        """
        Attribute the trace to its first surviving frame.

        Args:
            trace: Call stack, innermost frame first

        Returns:
            CallerInfo or None when every frame was skipped
        """
        for index, frame in enumerate(trace):
            if self.should_skip(trace, index):
                continue

            func = self.describe_function(frame)
            info = self.file_info(frame)
            return CallerInfo(
                info=f"{info.basename}:{info.line}",
                message=f"Called {func} in {info.file} on line {int(info.line)}",
            )
        return None
