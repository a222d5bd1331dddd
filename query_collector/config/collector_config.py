import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

DEFAULT_QUERY_MARKER = 'DebugPDOStatement::execute'
DEFAULT_VENDOR_MARKERS = [
    os.sep + 'vendor' + os.sep,
    os.sep + 'site-packages' + os.sep,
]


@dataclass
class CollectorConfig:

    document_root: Optional[str] = None
    log_queries_to_logger: bool = False
    query_marker: str = DEFAULT_QUERY_MARKER
    vendor_markers: List[str] = field(default_factory=lambda: list(DEFAULT_VENDOR_MARKERS))
    class_map: Dict[str, str] = field(default_factory=dict)
    log_level: str = "INFO"
    log_file: Optional[Path] = None
