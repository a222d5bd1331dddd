from dataclasses import dataclass


@dataclass(frozen=True)
class FileInfo:
    basename: str = 'unknown'
    file: str = 'unknown'  # relative to the project root
    line: int = 0


@dataclass(frozen=True)
class CallerInfo:
    """Attribution of a query to the code that issued it"""
    info: str  # "basename:line"
    message: str  # "Called X in Y on line Z"
