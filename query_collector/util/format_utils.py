"""
Human-readable formatting for durations and byte counts.

These strings end up in the collected summary, so the output must stay
stable for a given input.
"""

BYTE_SUFFIXES = ('B', 'KB', 'MB', 'GB', 'TB')


def _trim_number(value: float, precision: int = 2) -> str:
    text = f"{round(value, precision):.{precision}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def format_duration(seconds: float) -> str:
    """
    Format a duration given in seconds.

    Examples:
        0.0000042 -> '4μs'
        0.0123    -> '12.3ms'
        1.5       -> '1.5s'
    """
    if seconds < 0.001:
        return f"{round(seconds * 1000000)}μs"
    if seconds < 1:
        return f"{_trim_number(seconds * 1000)}ms"
    return f"{_trim_number(seconds)}s"


def format_bytes(size: float, precision: int = 2) -> str:
    """
    Format a byte count using base-1024 units (1536 -> '1.5KB').
    """
    if not size:
        return "0B"

    sign = '-' if size < 0 else ''
    size = abs(size)
    exponent = 0
    while size >= 1024 and exponent < len(BYTE_SUFFIXES) - 1:
        size /= 1024
        exponent += 1
    return f"{sign}{_trim_number(size, precision)}{BYTE_SUFFIXES[exponent]}"
