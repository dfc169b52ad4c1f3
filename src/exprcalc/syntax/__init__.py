"""Expression syntax package.

Provides the source cursor and the recursive-descent parser/evaluator.

Python 3.13+.
"""

from .cursor import EOF, SourceCursor
from .parser import EvaluationResult, ExpressionParser, ParseContext

__all__ = [
    "EOF",
    "EvaluationResult",
    "ExpressionParser",
    "ParseContext",
    "SourceCursor",
    "evaluate",
]


def evaluate(source: str) -> EvaluationResult:
    """Evaluate an expression with the default symbol tables.

    Convenience function for ExpressionParser().evaluate().

    Args:
        source: Expression text

    Returns:
        ``(value, None)`` on success, ``(None, ParseError)`` on failure

    Example:
        >>> from exprcalc.syntax import evaluate
        >>> evaluate("sqrt(4)")
        (2.0, None)
    """
    parser = ExpressionParser()
    return parser.evaluate(source)
