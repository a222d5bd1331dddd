import os
from pathlib import Path
from typing import Optional


def project_root(document_root: Optional[str] = None) -> Path:
    """
    Resolve the project root from the web server document root.

    A document root named 'web' is treated as the public folder of the
    project, so its parent is returned instead.

    Args:
        document_root: Configured document root. Defaults to the current
                       working directory when empty.

    Returns:
        Absolute, resolved project root
    """
    root = Path(document_root or os.getcwd()).resolve()
    if root.name == 'web':
        root = root.parent
    return root


def relative_file(file: str, document_root: Optional[str] = None) -> str:
    """
    Give a path relative to the project root.

    Args:
        file: Path of the source file as reported by the call stack
        document_root: Configured document root

    Returns:
        The path with the project root prefix stripped, or the raw path
        when it cannot be resolved on disk
    """
    try:
        target = Path(file).resolve(strict=True)
    except (OSError, RuntimeError):
        return file

    root = project_root(document_root)
    return str(target).replace(str(root) + os.sep, '')
