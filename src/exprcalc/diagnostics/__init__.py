"""Diagnostic system for expression evaluation.

Provides the ParseError value, error codes, spans, hints and formatting.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ParseError, SourceSpan
from .errors import CalcError, CalcSyntaxError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CalcError",
    "CalcSyntaxError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "ParseError",
    "SourceSpan",
]
