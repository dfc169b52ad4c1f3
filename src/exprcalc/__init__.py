"""exprcalc - Embeddable arithmetic expression evaluator.

Evaluates text such as ``sqrt((3+4)*(2+3))`` to a float in a single
recursive-descent pass, or reports a ParseError carrying the offset where
evaluation failed.

Public API:
    evaluate - Evaluate to ``(value, None)`` or ``(None, ParseError)``
    calculate - Evaluate to a float, raising CalcSyntaxError on failure
    ExpressionParser - Evaluator with custom symbol tables and limits
    ParseError - Failure value (code, message, position)

Exceptions:
    CalcError - Base exception class
    CalcSyntaxError - Raised by calculate() for unparseable expressions

Submodules:
    exprcalc.syntax - Cursor and grammar productions
    exprcalc.runtime - Constant and function tables
    exprcalc.diagnostics - Error codes, templates and formatting
    exprcalc.cli - Interactive REPL and self-test harness
"""

from .diagnostics import CalcError, CalcSyntaxError, DiagnosticCode, ParseError
from .runtime import ConstantTable, FunctionTable
from .syntax import EvaluationResult, ExpressionParser
from .syntax import evaluate as evaluate

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("exprcalc")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CalcError",
    "CalcSyntaxError",
    "ConstantTable",
    "DiagnosticCode",
    "EvaluationResult",
    "ExpressionParser",
    "FunctionTable",
    "ParseError",
    "__version__",
    "calculate",
    "evaluate",
]


def calculate(source: str) -> float:
    """Evaluate an expression with the default symbol tables, raising on failure.

    Args:
        source: Expression text

    Returns:
        The expression value

    Raises:
        CalcSyntaxError: If the expression cannot be evaluated

    Example:
        >>> calculate("cos(pi)")
        -1.0
    """
    return ExpressionParser().calculate(source)
