"""Exception hierarchy with structured diagnostics.

Evaluation itself reports failures as ParseError values. These exceptions
exist for callers that prefer raising, e.g. ``exprcalc.calculate()``.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ParseError


class CalcError(Exception):
    """Base exception for all exprcalc errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CalcError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CalcSyntaxError(CalcError):
    """Expression could not be evaluated.

    Wraps the ParseError produced by the grammar together with the source
    it was produced for, so that handlers can render a caret diagnostic.

    Attributes:
        error: The ParseError describing the failure
        source: The evaluated text
    """

    def __init__(self, error: ParseError, source: str) -> None:
        """Initialize CalcSyntaxError.

        Args:
            error: ParseError returned by the evaluator
            source: The text that failed to evaluate
        """
        super().__init__(error.to_diagnostic(source))
        self.error = error
        self.source = source

    @property
    def position(self) -> int:
        """Character offset at which evaluation failed."""
        return self.error.position
