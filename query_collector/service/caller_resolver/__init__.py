from .caller_resolver import CallerResolver
from .stack_capture import capture_trace

__all__ = ["CallerResolver", "capture_trace"]
