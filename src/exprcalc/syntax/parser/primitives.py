"""Primitive parsers for the expression grammar.

This module provides character classification and the two token-level
productions:

    CONSTANT ::= ['+' | '-'] DIGIT* ['.' DIGIT*] [('e' | 'E') ['+' | '-'] DIGIT+]
    SYMBOL   ::= ALPHA (ALPHA | DIGIT)*

Although both DIGIT* runs of CONSTANT are optional, one of them must be
non-empty; float() conversion enforces that after maximal munch.

Each parser advances the cursor and returns either its value or a ParseError.
"""

from exprcalc.constants import ASCII_DIGITS, ASCII_LETTERS
from exprcalc.diagnostics import ErrorTemplate, ParseError
from exprcalc.syntax.cursor import SourceCursor

__all__ = [
    "is_number_start",
    "is_symbol_char",
    "is_symbol_start",
    "parse_constant",
    "parse_symbol",
]

_SIGNS: str = "+-"
_EXPONENT_MARKERS: str = "eE"


def is_number_start(ch: str) -> bool:
    """Check if character can begin a CONSTANT (digit, sign or '.').

    Examples:
        >>> is_number_start("7"), is_number_start("-"), is_number_start(".")
        (True, True, True)
        >>> is_number_start("e")
        False
    """
    return len(ch) == 1 and (ch in ASCII_DIGITS or ch in _SIGNS or ch == ".")


def is_symbol_start(ch: str) -> bool:
    """Check if character can begin a SYMBOL (ASCII letter)."""
    return len(ch) == 1 and ch in ASCII_LETTERS


def is_symbol_char(ch: str) -> bool:
    """Check if character can continue a SYMBOL (ASCII letter or digit)."""
    return len(ch) == 1 and (ch in ASCII_LETTERS or ch in ASCII_DIGITS)


def _is_digit(ch: str) -> bool:
    return len(ch) == 1 and ch in ASCII_DIGITS


def parse_constant(cursor: SourceCursor) -> float | ParseError:
    """Parse a floating point literal.

    Gathers the longest run of characters that fits the CONSTANT grammar,
    then converts it with float().

    Examples:
        1.234 -> 1.234
        -.1 -> -0.1
        456.789e+5 -> 45678900.0

    Args:
        cursor: Cursor at the first character of the literal

    Returns:
        The literal's value, or ParseError:
        - MISSING_EXPONENT_DIGITS at the character after 'e'/'E' (and sign)
        - INVALID_NUMERIC_LITERAL at the literal's start ("+", "-", ".", ...)
    """
    cursor.skip_whitespace()
    start_pos = cursor.pos

    # Optional leading sign
    if cursor.peek() in _SIGNS:
        cursor.advance()

    # Mantissa left of '.'
    while _is_digit(cursor.peek()):
        cursor.advance()

    # Mantissa right of '.'
    if cursor.peek() == ".":
        cursor.advance()
        while _is_digit(cursor.peek()):
            cursor.advance()

    # Optional exponent
    if cursor.peek() in _EXPONENT_MARKERS:
        cursor.advance()
        if cursor.peek() in _SIGNS:
            cursor.advance()
        if not _is_digit(cursor.peek()):
            return ErrorTemplate.missing_exponent_digits(cursor.pos)
        while _is_digit(cursor.peek()):
            cursor.advance()

    text = cursor.slice_from(start_pos)
    try:
        # Overflowing magnitudes ("1e999") convert to inf
        return float(text)
    except ValueError:
        return ErrorTemplate.invalid_numeric_literal(text, start_pos)


def parse_symbol(cursor: SourceCursor) -> str | ParseError:
    """Parse a symbol name: [a-zA-Z][a-zA-Z0-9]*

    Examples:
        pi -> "pi"
        sqrt -> "sqrt"
        x2 -> "x2"

    Args:
        cursor: Current position in source (leading whitespace is skipped)

    Returns:
        The symbol name, or ParseError (EXPECTED_OPERAND) if the current
        character is not an ASCII letter
    """
    cursor.skip_whitespace()
    start_pos = cursor.pos

    if not is_symbol_start(cursor.peek()):
        return ErrorTemplate.expected_symbol_start(start_pos)

    while is_symbol_char(cursor.peek()):
        cursor.advance()

    return cursor.slice_from(start_pos)
