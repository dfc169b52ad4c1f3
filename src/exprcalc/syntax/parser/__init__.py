"""Expression parser module.

Module Organization:
- core.py: ExpressionParser class and evaluate() entry point
- primitives.py: Token-level parsers (constants, symbols) and character classes
- rules.py: Grammar productions (expression, sum, product, term, identifier)

Public API:
    ExpressionParser: Main parser class
    EvaluationResult: (value, None) | (None, ParseError)
    ParseContext: Per-evaluation context (advanced usage)
"""

from exprcalc.syntax.parser.core import EvaluationResult, ExpressionParser
from exprcalc.syntax.parser.rules import ParseContext

__all__ = ["EvaluationResult", "ExpressionParser", "ParseContext"]
