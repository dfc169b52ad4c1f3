"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import DiagnosticCode, ParseError


class ErrorTemplate:
    """Centralized error message templates.

    Every ParseError is created here, at the exact cursor offset the caller
    passes in. NO f-strings at the return sites in the grammar!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def unexpected_trailing_input(position: int) -> ParseError:
        """Content remains after a complete top-level expression.

        Args:
            position: Offset of the first unconsumed non-whitespace character

        Returns:
            ParseError for UNEXPECTED_TRAILING_INPUT
        """
        return ParseError(
            code=DiagnosticCode.UNEXPECTED_TRAILING_INPUT,
            message="Syntax error: unexpected input after expression",
            position=position,
            hint="A sum accepts a single '+' or '-'; group further terms with parentheses",
        )

    @staticmethod
    def expected_operand(position: int) -> ParseError:
        """A number, symbol or parenthesized expression was required.

        Args:
            position: Offset where the operand should start

        Returns:
            ParseError for EXPECTED_OPERAND
        """
        return ParseError(
            code=DiagnosticCode.EXPECTED_OPERAND,
            message="Expected a number, symbol or parenthesized expression",
            position=position,
        )

    @staticmethod
    def expected_symbol_start(position: int) -> ParseError:
        """A symbol must begin with an ASCII letter.

        Args:
            position: Offset of the offending character

        Returns:
            ParseError for EXPECTED_OPERAND
        """
        return ParseError(
            code=DiagnosticCode.EXPECTED_OPERAND,
            message="Expected alpha character at beginning of symbol",
            position=position,
        )

    @staticmethod
    def unknown_function(name: str, position: int, known: Iterable[str] = ()) -> ParseError:
        """Symbol followed by '(' is not in the function table.

        Args:
            name: The unresolved function name
            position: Offset at which the lookup failed
            known: Names available in the function table

        Returns:
            ParseError for UNKNOWN_FUNCTION
        """
        msg = f'Unknown function "{name}"'
        names = ", ".join(sorted(known))
        return ParseError(
            code=DiagnosticCode.UNKNOWN_FUNCTION,
            message=msg,
            position=position,
            hint=f"Known functions are: {names}" if names else None,
        )

    @staticmethod
    def unknown_symbol(name: str, position: int, known: Iterable[str] = ()) -> ParseError:
        """Bare symbol is not in the constant table.

        Args:
            name: The unresolved constant name
            position: Offset at which the lookup failed
            known: Names available in the constant table

        Returns:
            ParseError for UNKNOWN_SYMBOL
        """
        msg = f'Unknown symbol "{name}"'
        names = ", ".join(sorted(known))
        return ParseError(
            code=DiagnosticCode.UNKNOWN_SYMBOL,
            message=msg,
            position=position,
            hint=f"Known constants are: {names}" if names else None,
        )

    @staticmethod
    def missing_exponent_digits(position: int) -> ParseError:
        """Exponent marker without a following digit.

        Args:
            position: Offset after the exponent marker and optional sign

        Returns:
            ParseError for MISSING_EXPONENT_DIGITS
        """
        return ParseError(
            code=DiagnosticCode.MISSING_EXPONENT_DIGITS,
            message="Expected exponent in floating point constant",
            position=position,
        )

    @staticmethod
    def invalid_numeric_literal(text: str, position: int) -> ParseError:
        """Accumulated numeral text does not convert to a float.

        Args:
            text: The consumed numeral characters
            position: Offset where the numeral started

        Returns:
            ParseError for INVALID_NUMERIC_LITERAL
        """
        msg = f'Invalid numeric literal "{text}"'
        return ParseError(
            code=DiagnosticCode.INVALID_NUMERIC_LITERAL,
            message=msg,
            position=position,
            hint="A number needs at least one digit before or after the decimal point",
        )

    @staticmethod
    def unexpected_character(expected: str, position: int) -> ParseError:
        """Single-character consumption mismatch.

        Args:
            expected: The character that was required
            position: Offset of the mismatching character (or end of input)

        Returns:
            ParseError for UNEXPECTED_CHARACTER
        """
        msg = f"Expected '{expected}'"
        return ParseError(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            position=position,
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, position: int) -> ParseError:
        """Nested sums exceed the configured depth.

        Args:
            max_depth: The configured nesting limit
            position: Offset where the next nested sum would start

        Returns:
            ParseError for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return ParseError(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            position=position,
            hint="Reduce the number of nested parentheses, function calls or '*'/'/' operators",
        )
