"""Hypothesis strategies for exprcalc property-based testing.

Usage:
    from tests.strategies import numeric_literals, symbol_names
"""

from .expressions import (
    KNOWN_NAMES,
    finite_floats,
    inline_whitespace,
    numeric_literals,
    padded,
    symbol_names,
    unknown_symbol_names,
)

__all__ = [
    "KNOWN_NAMES",
    "finite_floats",
    "inline_whitespace",
    "numeric_literals",
    "padded",
    "symbol_names",
    "unknown_symbol_names",
]
