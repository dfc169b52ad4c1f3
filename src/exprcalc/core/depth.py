"""Recursion depth limiting for the grammar engine.

Every nested Sum costs a handful of Python stack frames. The configured
nesting limit is validated against the interpreter's recursion limit so that
deep input fails with a ParseError rather than RecursionError.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["depth_clamp"]

logger = logging.getLogger(__name__)

# Python frames consumed per nesting level: Sum -> Product -> Term -> Sum.
FRAMES_PER_LEVEL: int = 4


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Clamp requested nesting depth against Python recursion limit.

    Logs a warning if clamping occurs.

    Args:
        requested_depth: Desired maximum nesting depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(100)  # OK, within limit
        100
        >>> depth_clamp(500)  # Exceeds limit, clamped to (1000 - 50) // 4
        237
    """
    if requested_depth < 1:
        msg = f"Nesting depth must be >= 1, got {requested_depth}"
        raise ValueError(msg)
    max_safe_depth = (sys.getrecursionlimit() - reserve_frames) // FRAMES_PER_LEVEL
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested nesting depth %d exceeds what Python recursion limit (%d) allows. "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
