"""Core expression parser implementation.

This module provides the ExpressionParser class that binds configuration
(symbol tables, limits) to the grammar rules in
:mod:`~exprcalc.syntax.parser.rules`.

Architecture:
    Each call to :meth:`ExpressionParser.evaluate` creates a fresh
    :class:`~exprcalc.syntax.cursor.SourceCursor` and
    :class:`~exprcalc.syntax.parser.rules.ParseContext`. Nothing persists
    between calls, so one parser may be shared freely.

Security:
    Includes configurable input size limit and nesting depth limit.

See Also:
    - :mod:`exprcalc.syntax.parser.rules` - Grammar productions
    - :mod:`exprcalc.runtime.symbols` - Constant and function tables
"""

import logging
from typing import TypeAlias

from exprcalc.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from exprcalc.core import depth_clamp
from exprcalc.diagnostics import CalcSyntaxError, ParseError
from exprcalc.runtime.symbols import (
    DEFAULT_CONSTANTS,
    DEFAULT_FUNCTIONS,
    ConstantTable,
    FunctionTable,
)
from exprcalc.syntax.cursor import SourceCursor
from exprcalc.syntax.parser.rules import ParseContext, parse_expression

__all__ = ["EvaluationResult", "ExpressionParser"]

logger = logging.getLogger(__name__)

# (value, None) on success, (None, error) on failure.
EvaluationResult: TypeAlias = tuple[float, None] | tuple[None, ParseError]


class ExpressionParser:
    """Arithmetic expression evaluator using a recursive-descent grammar.

    Design:
    - Single pass: productions compute values directly, no AST
    - Failures are returned as ParseError values, never raised
    - Immutable configuration; safe to share across threads

    Attributes:
        constants: Named constants (default: e, pi)
        functions: Named unary functions (default: cos, sin, sqrt)
        max_source_size: Maximum allowed source size in characters (default: 1 MiB)
        max_nesting_depth: Maximum nesting of parenthesized/right-hand sums (default: 100)

    Example:
        >>> parser = ExpressionParser()
        >>> parser.evaluate("(3+4)*(2+3)")
        (35.0, None)
        >>> value, error = parser.evaluate("1+2+3")
        >>> error.position
        3
    """

    __slots__ = ("_constants", "_functions", "_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        constants: ConstantTable | None = None,
        functions: FunctionTable | None = None,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional symbol tables and limits.

        Args:
            constants: Constant table (default: DEFAULT_CONSTANTS)
            functions: Function table (default: DEFAULT_FUNCTIONS)
            max_source_size: Maximum source size in characters (default: 1 MiB).
                            Set to 0 to disable size limit.
            max_nesting_depth: Maximum nesting depth (default: 100), clamped
                              against the Python recursion limit.
        """
        self._constants = constants if constants is not None else DEFAULT_CONSTANTS
        self._functions = functions if functions is not None else DEFAULT_FUNCTIONS
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = depth_clamp(
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def constants(self) -> ConstantTable:
        """Named constants available to expressions."""
        return self._constants

    @property
    def functions(self) -> FunctionTable:
        """Named unary functions available to expressions."""
        return self._functions

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed nesting depth."""
        return self._max_nesting_depth

    def evaluate(self, source: str) -> EvaluationResult:
        """Evaluate an expression.

        Args:
            source: Expression text

        Returns:
            ``(value, None)`` on success, ``(None, ParseError)`` on failure.

        Raises:
            TypeError: If source is not a str
            ValueError: If source exceeds max_source_size
        """
        if not isinstance(source, str):
            msg = f"Expression source must be str, got {type(source).__name__}"
            raise TypeError(msg)

        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in ExpressionParser constructor to increase limit."
            )
            raise ValueError(msg)

        cursor = SourceCursor(source)
        context = ParseContext(
            constants=self._constants,
            functions=self._functions,
            max_nesting_depth=self._max_nesting_depth,
        )

        result = parse_expression(cursor, context)
        if isinstance(result, ParseError):
            logger.debug(
                "Evaluation of %r failed at position %d: [%s] %s",
                source[:50],
                result.position,
                result.code.name,
                result.message,
            )
            return (None, result)

        logger.debug("Evaluated %r -> %r", source[:50], result)
        return (result, None)

    def calculate(self, source: str) -> float:
        """Evaluate an expression, raising on failure.

        Args:
            source: Expression text

        Returns:
            The expression value

        Raises:
            CalcSyntaxError: If the expression cannot be evaluated
        """
        value, error = self.evaluate(source)
        if error is not None:
            raise CalcSyntaxError(error, source)
        return value

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"ExpressionParser(constants={len(self._constants)}, "
            f"functions={len(self._functions)}, "
            f"max_nesting_depth={self._max_nesting_depth})"
        )
