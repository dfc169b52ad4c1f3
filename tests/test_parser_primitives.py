"""Tests for syntax.parser.primitives module.

Character classification, CONSTANT maximal munch and SYMBOL parsing.
"""

from __future__ import annotations

import math

import pytest
from hypothesis import event, example, given
from hypothesis import strategies as st

from exprcalc.diagnostics import DiagnosticCode, ParseError
from exprcalc.syntax.cursor import SourceCursor
from exprcalc.syntax.parser.primitives import (
    is_number_start,
    is_symbol_char,
    is_symbol_start,
    parse_constant,
    parse_symbol,
)
from tests.strategies import numeric_literals, symbol_names

# ============================================================================
# Character classification
# ============================================================================


class TestCharacterClassification:
    """ASCII-only character classes."""

    @pytest.mark.parametrize("ch", ["0", "9", "+", "-", "."])
    def test_number_start(self, ch: str) -> None:
        """Digits, signs and '.' begin a constant."""
        assert is_number_start(ch)

    @pytest.mark.parametrize("ch", ["e", "(", " ", "\0", "²", "٣"])
    def test_not_number_start(self, ch: str) -> None:
        """Letters, Unicode digits and the EOF sentinel do not."""
        assert not is_number_start(ch)

    @given(ch=st.sampled_from("abcxyzABCXYZ"))
    def test_ascii_letters_start_symbols(self, ch: str) -> None:
        """ASCII letters start and continue symbols."""
        assert is_symbol_start(ch)
        assert is_symbol_char(ch)

    @given(ch=st.characters(min_codepoint=48, max_codepoint=57))
    def test_digits_continue_but_not_start(self, ch: str) -> None:
        """ASCII digits continue symbols but cannot start them."""
        assert not is_symbol_start(ch)
        assert is_symbol_char(ch)

    @pytest.mark.parametrize("ch", ["é", "π", "_", "-", ""])
    def test_non_ascii_letters_rejected(self, ch: str) -> None:
        """Non-ASCII letters, underscore and empty string are not symbol characters."""
        assert not is_symbol_start(ch)
        assert not is_symbol_char(ch)


# ============================================================================
# parse_constant
# ============================================================================


class TestParseConstant:
    """CONSTANT production."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("1", 1.0),
            ("1.234", 1.234),
            (".1", 0.1),
            ("1.", 1.0),
            ("-2", -2.0),
            ("+2", 2.0),
            ("-.1", -0.1),
            ("1e9", 1e9),
            ("2e-8", 2e-8),
            ("3E+7", 3e7),
            ("456.789e+5", 456.789e5),
        ],
    )
    def test_valid_literals(self, source: str, expected: float) -> None:
        """Literals convert exactly as float() does."""
        cursor = SourceCursor(source)

        assert parse_constant(cursor) == expected
        assert cursor.is_eof

    def test_stops_at_first_non_numeric(self) -> None:
        """Maximal munch stops before an operator."""
        cursor = SourceCursor("12.5*2")

        assert parse_constant(cursor) == 12.5
        assert cursor.pos == 4

    def test_second_sign_not_consumed(self) -> None:
        """Only one leading sign belongs to the literal."""
        cursor = SourceCursor("1-2")

        assert parse_constant(cursor) == 1.0
        assert cursor.peek() == "-"

    def test_overflow_is_infinite(self) -> None:
        """Out-of-range magnitudes become inf rather than failing."""
        assert parse_constant(SourceCursor("1e999")) == math.inf
        assert parse_constant(SourceCursor("-1e999")) == -math.inf

    @pytest.mark.parametrize(
        ("source", "position"),
        [("1e", 2), ("1e+", 3), ("2.5E-x", 5), ("-e", 2)],
    )
    def test_missing_exponent_digits(self, source: str, position: int) -> None:
        """Exponent marker without digits fails after the marker and sign."""
        result = parse_constant(SourceCursor(source))

        assert isinstance(result, ParseError)
        assert result.code is DiagnosticCode.MISSING_EXPONENT_DIGITS
        assert result.position == position

    @pytest.mark.parametrize("source", ["-", "+", ".", "-.", "+.", "", "-.e5"])
    def test_invalid_literal_at_start(self, source: str) -> None:
        """Literals without mantissa digits fail at the literal's start."""
        cursor = SourceCursor(source)

        result = parse_constant(cursor)

        assert isinstance(result, ParseError)
        assert result.code is DiagnosticCode.INVALID_NUMERIC_LITERAL
        assert result.position == 0

    def test_invalid_literal_position_after_whitespace(self) -> None:
        """Start position is taken after leading whitespace."""
        result = parse_constant(SourceCursor("  -"))

        assert isinstance(result, ParseError)
        assert result.position == 2

    @given(literal=numeric_literals)
    @example(literal="0")
    @example(literal=".5e-3")
    def test_grammar_literals_match_float(self, literal: str) -> None:
        """PROPERTY: every CONSTANT-grammar literal parses to float(literal)."""
        cursor = SourceCursor(literal)

        result = parse_constant(cursor)

        event(f"exponent={'e' in literal.lower()}")
        assert result == float(literal)
        assert cursor.is_eof


# ============================================================================
# parse_symbol
# ============================================================================


class TestParseSymbol:
    """SYMBOL production."""

    def test_symbol_with_digits(self) -> None:
        """Letters and digits after the first letter are consumed."""
        cursor = SourceCursor("log10(x)")

        assert parse_symbol(cursor) == "log10"
        assert cursor.peek() == "("

    def test_leading_whitespace_skipped(self) -> None:
        """Whitespace before a symbol is skipped."""
        assert parse_symbol(SourceCursor("  pi")) == "pi"

    @pytest.mark.parametrize("source", ["1abc", "_x", ""])
    def test_must_start_with_letter(self, source: str) -> None:
        """Non-letter start is an EXPECTED_OPERAND failure."""
        result = parse_symbol(SourceCursor(source))

        assert isinstance(result, ParseError)
        assert result.code is DiagnosticCode.EXPECTED_OPERAND
        assert result.position == 0

    @given(name=symbol_names)
    def test_generated_symbols_roundtrip(self, name: str) -> None:
        """PROPERTY: any [a-zA-Z][a-zA-Z0-9]* name is returned unchanged."""
        cursor = SourceCursor(name + "(")

        assert parse_symbol(cursor) == name
        assert cursor.pos == len(name)
