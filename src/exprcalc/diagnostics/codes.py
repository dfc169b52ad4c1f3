"""Diagnostic codes and data structures.

Defines error codes, source spans, diagnostics and the ParseError value
returned by every failing evaluation.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ParseError",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Reference errors (unknown symbols and functions)
        3000-3999: Syntax errors (parser failures)
    """

    # Reference errors (1000-1999)
    UNKNOWN_SYMBOL = 1001
    UNKNOWN_FUNCTION = 1002

    # Syntax errors (3000-3999)
    UNEXPECTED_TRAILING_INPUT = 3001
    EXPECTED_OPERAND = 3002
    MISSING_EXPONENT_DIGITS = 3003
    INVALID_NUMERIC_LITERAL = 3004
    UNEXPECTED_CHARACTER = 3005
    NESTING_DEPTH_EXCEEDED = 3006


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when the source text is unavailable)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNKNOWN_SYMBOL]: Unknown symbol "tau"
              --> line 1, column 4
              = help: Known constants are: e, pi

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)


@dataclass(frozen=True, slots=True)
class ParseError:
    """Evaluation failure with the offset where it was detected.

    Design:
        - Position is the cursor offset at the point of detection
        - Carries no reference to the source text
        - Immutable; one ParseError is the whole outcome of a failed evaluation

    Attributes:
        code: Error category from the taxonomy
        message: Human-readable description
        position: Character offset into the evaluated source
        hint: Optional suggestion for fixing the input

    Example:
        >>> error = ParseError(DiagnosticCode.UNEXPECTED_TRAILING_INPUT,
        ...                    "Unexpected input after expression", 3)
        >>> print(error.format_with_pointer())
           ^
        error (position = 3): Unexpected input after expression
    """

    code: DiagnosticCode
    message: str
    position: int
    hint: str | None = None

    def format_error(self) -> str:
        """Format error as a single line.

        Returns:
            String of the form ``error (position = N): message``
        """
        return f"error (position = {self.position}): {self.message}"

    def format_with_pointer(self, indent: int = 0) -> str:
        """Format error as a caret line followed by the message line.

        Args:
            indent: Extra columns before the caret, e.g. the width of a
                REPL prompt that preceded the echoed source

        Returns:
            Two-line diagnostic with the caret under the failing column
        """
        pointer = " " * (indent + self.position) + "^"
        return f"{pointer}\n{self.format_error()}"

    def to_diagnostic(self, source: str) -> Diagnostic:
        """Build a Diagnostic with line and column resolved against source.

        Args:
            source: The text that was evaluated when this error occurred

        Returns:
            Diagnostic with a zero-width span at the error position
        """
        pos = min(self.position, len(source))
        line = source.count("\n", 0, pos) + 1
        last_newline = source.rfind("\n", 0, pos)
        column = pos - last_newline if last_newline >= 0 else pos + 1
        span = SourceSpan(start=pos, end=pos, line=line, column=column)
        return Diagnostic(code=self.code, message=self.message, span=span, hint=self.hint)
