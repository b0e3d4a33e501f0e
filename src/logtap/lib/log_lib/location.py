"""
Call-site location for tap output.

The tap function captures the frame that called it and hands it here,
so the reported location never depends on how many wrapper frames sit
between the caller and this module.
"""

import inspect
from pathlib import Path
from types import FrameType
from typing import Optional


class LocationUnresolvableError(RuntimeError):
    """Raised when no caller frame is available to report."""


def caller_frame(stacklevel: int = 1,
                 frame: Optional[FrameType] = None) -> FrameType:
    """Walk outward from a frame and return the one ``stacklevel`` up.

    Args:
        stacklevel: How many frames to step out (1 = the direct caller)
        frame: Starting frame (default: the frame calling this function)

    Returns:
        The frame ``stacklevel`` levels above the start

    Raises:
        LocationUnresolvableError: If the interpreter has no frame
            support or the stack is shallower than requested.
    """
    if stacklevel < 1:
        raise ValueError(f"stacklevel must be >= 1, got {stacklevel}")

    if frame is None:
        current = inspect.currentframe()
        frame = current.f_back if current is not None else None
    if frame is None:
        raise LocationUnresolvableError("call stack is not available")

    for _ in range(stacklevel):
        frame = frame.f_back
        if frame is None:
            raise LocationUnresolvableError(
                f"call stack is shallower than stacklevel={stacklevel}"
            )
    return frame


def format_location(frame: FrameType) -> str:
    """Format a frame as ' - <filename>:<line>' with directories stripped."""
    filename = Path(frame.f_code.co_filename).name
    return f" - {filename}:{frame.f_lineno}"
