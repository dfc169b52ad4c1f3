"""Tests for diagnostics: codes, ParseError, templates and exceptions."""

from __future__ import annotations

import pytest

from exprcalc.diagnostics import (
    CalcError,
    CalcSyntaxError,
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    ParseError,
    SourceSpan,
)


class TestDiagnosticCode:
    """Error code taxonomy."""

    def test_codes_unique(self) -> None:
        """No two codes share a value."""
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))

    def test_reference_and_syntax_ranges(self) -> None:
        """Lookup failures are 1xxx, grammar failures 3xxx."""
        assert DiagnosticCode.UNKNOWN_SYMBOL.value == 1001
        assert DiagnosticCode.UNKNOWN_FUNCTION.value == 1002
        for code in (
            DiagnosticCode.UNEXPECTED_TRAILING_INPUT,
            DiagnosticCode.EXPECTED_OPERAND,
            DiagnosticCode.MISSING_EXPONENT_DIGITS,
            DiagnosticCode.INVALID_NUMERIC_LITERAL,
            DiagnosticCode.UNEXPECTED_CHARACTER,
            DiagnosticCode.NESTING_DEPTH_EXCEEDED,
        ):
            assert 3000 <= code.value < 4000


class TestSourceSpan:
    """SourceSpan validation."""

    def test_valid_span(self) -> None:
        """Zero-width span at offset 0 is valid."""
        span = SourceSpan(start=0, end=0, line=1, column=1)

        assert span.column == 1

    @pytest.mark.parametrize(
        ("kwargs", "match"),
        [
            ({"start": -1, "end": 0, "line": 1, "column": 1}, "start"),
            ({"start": 3, "end": 2, "line": 1, "column": 1}, "end"),
            ({"start": 0, "end": 0, "line": 0, "column": 1}, "line"),
            ({"start": 0, "end": 0, "line": 1, "column": 0}, "column"),
        ],
    )
    def test_invalid_span(self, kwargs: dict[str, int], match: str) -> None:
        """Out-of-range fields raise ValueError naming the field."""
        with pytest.raises(ValueError, match=match):
            SourceSpan(**kwargs)


class TestParseError:
    """ParseError value and its renderings."""

    def test_format_error(self) -> None:
        """Single-line form includes position and message."""
        error = ParseError(DiagnosticCode.EXPECTED_OPERAND, "Expected operand", 4)

        assert error.format_error() == "error (position = 4): Expected operand"

    def test_format_with_pointer(self) -> None:
        """Caret sits under the failing column."""
        error = ErrorTemplate.unexpected_trailing_input(3)

        lines = error.format_with_pointer().split("\n")

        assert lines[0] == "   ^"
        assert lines[1] == (
            "error (position = 3): Syntax error: unexpected input after expression"
        )

    def test_format_with_pointer_indent(self) -> None:
        """Indent shifts only the caret line."""
        error = ErrorTemplate.expected_operand(0)

        lines = error.format_with_pointer(indent=3).split("\n")

        assert lines[0] == "   ^"
        assert lines[1].startswith("error")

    def test_is_frozen(self) -> None:
        """ParseError is immutable."""
        error = ErrorTemplate.expected_operand(0)

        with pytest.raises(AttributeError):
            error.position = 1  # type: ignore[misc]

    def test_equality(self) -> None:
        """Errors compare by value."""
        assert ErrorTemplate.expected_operand(2) == ErrorTemplate.expected_operand(2)
        assert ErrorTemplate.expected_operand(2) != ErrorTemplate.expected_operand(3)

    @pytest.mark.parametrize(
        ("source", "position", "line", "column"),
        [
            ("bar", 3, 1, 4),
            ("bar", 0, 1, 1),
            ("1 +\n bar", 8, 2, 5),
            ("1 +\n", 4, 2, 1),
            ("ab", 10, 1, 3),
        ],
    )
    def test_to_diagnostic_line_column(
        self, source: str, position: int, line: int, column: int
    ) -> None:
        """Offsets resolve to 1-indexed line and column."""
        error = ParseError(DiagnosticCode.UNKNOWN_SYMBOL, "msg", position, hint="hint")

        diagnostic = error.to_diagnostic(source)

        assert diagnostic.span is not None
        assert (diagnostic.span.line, diagnostic.span.column) == (line, column)
        assert diagnostic.span.start == diagnostic.span.end
        assert diagnostic.hint == "hint"
        assert diagnostic.code is DiagnosticCode.UNKNOWN_SYMBOL


class TestErrorTemplate:
    """Template messages and hints."""

    def test_unknown_function(self) -> None:
        """Message quotes the name, hint lists known functions sorted."""
        error = ErrorTemplate.unknown_function("foo", 3, ["sqrt", "cos"])

        assert error.code is DiagnosticCode.UNKNOWN_FUNCTION
        assert error.message == 'Unknown function "foo"'
        assert error.hint == "Known functions are: cos, sqrt"

    def test_unknown_symbol_without_known_names(self) -> None:
        """Empty table gives no hint."""
        error = ErrorTemplate.unknown_symbol("bar", 3)

        assert error.message == 'Unknown symbol "bar"'
        assert error.hint is None

    def test_invalid_numeric_literal(self) -> None:
        """Message quotes the consumed text."""
        error = ErrorTemplate.invalid_numeric_literal("-.", 0)

        assert error.message == 'Invalid numeric literal "-."'
        assert error.hint is not None

    def test_missing_exponent_digits(self) -> None:
        """Exponent failure message."""
        error = ErrorTemplate.missing_exponent_digits(2)

        assert error.message == "Expected exponent in floating point constant"
        assert error.position == 2

    def test_expected_symbol_start(self) -> None:
        """Symbol start failure shares the EXPECTED_OPERAND code."""
        error = ErrorTemplate.expected_symbol_start(0)

        assert error.code is DiagnosticCode.EXPECTED_OPERAND
        assert error.message == "Expected alpha character at beginning of symbol"

    def test_nesting_depth_exceeded(self) -> None:
        """Message names the configured limit."""
        error = ErrorTemplate.nesting_depth_exceeded(100, 42)

        assert error.message == "Maximum nesting depth (100) exceeded"
        assert error.position == 42


class TestExceptions:
    """CalcError hierarchy."""

    def test_calc_error_from_string(self) -> None:
        """Plain message, no diagnostic."""
        error = CalcError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_calc_error_from_diagnostic(self) -> None:
        """Diagnostic is kept and rendered as the message."""
        diagnostic = Diagnostic(code=DiagnosticCode.EXPECTED_OPERAND, message="Expected operand")

        error = CalcError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error) == "error[EXPECTED_OPERAND]: Expected operand"

    def test_calc_syntax_error(self) -> None:
        """Syntax error carries ParseError, source and position."""
        parse_error = ErrorTemplate.unknown_symbol("tau", 3, ["e", "pi"])

        error = CalcSyntaxError(parse_error, "tau")

        assert isinstance(error, CalcError)
        assert error.error is parse_error
        assert error.source == "tau"
        assert error.position == 3
        assert error.diagnostic is not None
        assert error.diagnostic.span is not None
        assert error.diagnostic.span.column == 4
        assert "Known constants are: e, pi" in str(error)

    def test_diagnostic_str_is_message(self) -> None:
        """str(Diagnostic) is its message."""
        diagnostic = Diagnostic(code=DiagnosticCode.UNKNOWN_SYMBOL, message="Unknown symbol")

        assert str(diagnostic) == "Unknown symbol"
