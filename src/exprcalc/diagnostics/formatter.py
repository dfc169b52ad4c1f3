"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic, ParseError

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    CARET = "caret"  # Caret under the failing column (REPL style)
    RUST = "rust"  # Rust compiler-style output
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Formats Diagnostic objects, and ParseError values together with the
    source they were produced for.

    Attributes:
        output_format: Output style (caret, rust, simple, json)

    Example:
        >>> error = ErrorTemplate.unknown_symbol("tau", 3, ("e", "pi"))
        >>> formatter = DiagnosticFormatter()
        >>> print(formatter.format_parse_error(error, "tau"))
           ^
        error (position = 3): Unknown symbol "tau"

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.RUST)
        >>> print(formatter.format_parse_error(error, "tau"))
        error[UNKNOWN_SYMBOL]: Unknown symbol "tau"
          --> line 1, column 4
          = help: Known constants are: e, pi
    """

    output_format: OutputFormat = OutputFormat.CARET

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        CARET has no meaning without a position, so it falls back to RUST.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)
            case _:
                return self._format_rust(diagnostic)

    def format_parse_error(self, error: ParseError, source: str, indent: int = 0) -> str:
        """Format a ParseError returned by evaluation.

        Args:
            error: The evaluation failure
            source: The text that was evaluated
            indent: Columns preceding the echoed source (CARET only)

        Returns:
            Formatted diagnostic string
        """
        if self.output_format is OutputFormat.CARET:
            return error.format_with_pointer(indent)
        return self.format(error.to_diagnostic(source))

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[UNKNOWN_FUNCTION]: Unknown function "foo"
              --> line 1, column 4
              = help: Known functions are: cos, sin, sqrt
        """
        parts = [f"{diagnostic.severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.span:
            parts.append(f"  --> line {diagnostic.span.line}, column {diagnostic.span.column}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            UNKNOWN_FUNCTION: Unknown function "foo"
        """
        return f"{diagnostic.code.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "EXPECTED_OPERAND", "code_value": 3002, "message": "...", ...}
        """
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)
