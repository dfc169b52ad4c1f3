"""Shared constants for exprcalc.

Centralized configuration used by the parser, the symbol tables and the CLI.
Placing constants here avoids circular imports and provides a single source
of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Character classes
    "ASCII_DIGITS",
    "ASCII_LETTERS",
    "WHITESPACE_CHARS",
    # CLI
    "DEFAULT_PROMPT",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of Sum productions (parentheses, function arguments and the
# right operand of '*' or '/'). Each level costs several Python stack frames,
# so the limit keeps evaluation well below the default recursion limit (1000).
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (1 MiB).
MAX_SOURCE_SIZE: int = 1024 * 1024

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# ASCII only: str.isdigit() and str.isalpha() accept Unicode digits and letters
# such as "\u00b2" that float() and the symbol grammar reject.
ASCII_DIGITS: str = "0123456789"
ASCII_LETTERS: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Space, tab, carriage return, newline.
WHITESPACE_CHARS: frozenset[str] = frozenset(" \t\r\n")

# ============================================================================
# CLI
# ============================================================================

DEFAULT_PROMPT: str = ">> "
