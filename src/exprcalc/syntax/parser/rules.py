"""Grammar rules for the expression evaluator.

The productions recognize the grammar and compute its value in one pass;
no syntax tree is built:

    EXPRESSION ::= SUM end-of-input
    SUM        ::= PRODUCT [('+' | '-') PRODUCT]
    PRODUCT    ::= TERM [('*' | '/') SUM]
    TERM       ::= '(' SUM ')' | CONSTANT | IDENTIFIER
    IDENTIFIER ::= SYMBOL ['(' SUM ')']

Grammar Notes:
    SUM accepts at most one operator, so "1+2+3" stops after "1+2" and
    EXPRESSION rejects the remaining "+3".

    The right operand of '*' and '/' is a whole SUM, so "2*3+4" is
    2*(3+4) = 14. Operators therefore associate to the right:
    "8/4/2" is 8/(4/2) = 4.

    Unary sign exists only as the optional sign of CONSTANT: "1+-2" is -1,
    while "-pi" fails (the sign starts a numeric literal).

Error Propagation:
    Every rule returns its value or a ParseError. The first ParseError is
    returned unchanged up the call stack; there is no recovery.

Security:
    Includes configurable nesting depth limit so that deeply nested input
    ("((((...", "1*1*1*...") cannot exhaust the Python stack.
"""

from dataclasses import dataclass, field, replace

from exprcalc.constants import MAX_DEPTH
from exprcalc.diagnostics import ErrorTemplate, ParseError
from exprcalc.runtime.functions import divide
from exprcalc.runtime.symbols import DEFAULT_CONSTANTS, DEFAULT_FUNCTIONS, ConstantTable, FunctionTable
from exprcalc.syntax.cursor import SourceCursor
from exprcalc.syntax.parser.primitives import (
    is_number_start,
    is_symbol_start,
    parse_constant,
    parse_symbol,
)

__all__ = [
    "ParseContext",
    "parse_expression",
    "parse_identifier",
    "parse_product",
    "parse_sum",
    "parse_term",
]


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for one evaluation.

    Carries the symbol tables and nesting depth by parameter passing instead
    of global state, so concurrent evaluations share nothing mutable.

    Attributes:
        constants: Table consulted for bare symbols
        functions: Table consulted for symbols followed by '('
        max_nesting_depth: Maximum allowed nesting of SUM
        current_depth: Current nesting depth (0 = top level)
    """

    constants: ConstantTable = field(default_factory=lambda: DEFAULT_CONSTANTS)
    functions: FunctionTable = field(default_factory=lambda: DEFAULT_FUNCTIONS)
    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been exceeded."""
        return self.current_depth >= self.max_nesting_depth

    def enter_nesting(self) -> "ParseContext":
        """Create new context with incremented depth for a nested SUM."""
        return replace(self, current_depth=self.current_depth + 1)


def parse_expression(cursor: SourceCursor, context: ParseContext) -> float | ParseError:
    """Parse EXPRESSION: a SUM followed by end of input.

    Args:
        cursor: Cursor at the start of the source
        context: Symbol tables and depth limit

    Returns:
        Value of the whole source, or ParseError. Trailing non-whitespace
        content yields UNEXPECTED_TRAILING_INPUT at its first character.
    """
    value = parse_sum(cursor, context)
    if isinstance(value, ParseError):
        return value

    cursor.skip_whitespace()
    if not cursor.is_eof:
        return ErrorTemplate.unexpected_trailing_input(cursor.pos)

    return value


def parse_sum(cursor: SourceCursor, context: ParseContext) -> float | ParseError:
    """Parse SUM: PRODUCT with at most one '+' or '-' PRODUCT.

    Args:
        cursor: Current position in source
        context: Symbol tables and depth limit

    Returns:
        Value of the sum, or ParseError
    """
    if context.is_depth_exceeded():
        return ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth, cursor.pos)

    left = parse_product(cursor, context)
    if isinstance(left, ParseError):
        return left

    cursor.skip_whitespace()
    operator = cursor.peek()
    if operator not in ("+", "-"):
        return left

    cursor.advance()
    right = parse_product(cursor, context)
    if isinstance(right, ParseError):
        return right

    return left + right if operator == "+" else left - right


def parse_product(cursor: SourceCursor, context: ParseContext) -> float | ParseError:
    """Parse PRODUCT: TERM with at most one '*' or '/' SUM.

    Division by zero follows IEEE-754 (inf or nan), see runtime.functions.divide.

    Args:
        cursor: Current position in source
        context: Symbol tables and depth limit

    Returns:
        Value of the product, or ParseError
    """
    left = parse_term(cursor, context)
    if isinstance(left, ParseError):
        return left

    cursor.skip_whitespace()
    operator = cursor.peek()
    if operator not in ("*", "/"):
        return left

    cursor.advance()
    right = parse_sum(cursor, context.enter_nesting())
    if isinstance(right, ParseError):
        return right

    return left * right if operator == "*" else divide(left, right)


def parse_term(cursor: SourceCursor, context: ParseContext) -> float | ParseError:
    """Parse TERM: parenthesized SUM, CONSTANT or IDENTIFIER.

    Dispatch on the first non-whitespace character:
        '('            -> parenthesized SUM
        digit, +, -, . -> CONSTANT
        ASCII letter   -> IDENTIFIER

    Args:
        cursor: Current position in source
        context: Symbol tables and depth limit

    Returns:
        Value of the term, or ParseError (EXPECTED_OPERAND when nothing matches)
    """
    cursor.skip_whitespace()

    next_char = cursor.peek()
    if next_char == "(":
        cursor.advance()
        value = parse_sum(cursor, context.enter_nesting())
        if isinstance(value, ParseError):
            return value

        cursor.skip_whitespace()
        error = cursor.expect(")")
        if error is not None:
            return error
        return value

    if is_number_start(next_char):
        return parse_constant(cursor)

    if is_symbol_start(next_char):
        return parse_identifier(cursor, context)

    return ErrorTemplate.expected_operand(cursor.pos)


def parse_identifier(cursor: SourceCursor, context: ParseContext) -> float | ParseError:
    """Parse IDENTIFIER: SYMBOL, optionally applied to a parenthesized SUM.

    A symbol followed by '(' (after optional whitespace) must name a function;
    otherwise it must name a constant. Lookup failures are reported at the
    cursor position after the symbol and any whitespace.

    Args:
        cursor: Current position in source
        context: Symbol tables and depth limit

    Returns:
        Constant value or function result, or ParseError
        (UNKNOWN_FUNCTION / UNKNOWN_SYMBOL / UNEXPECTED_CHARACTER)
    """
    symbol = parse_symbol(cursor)
    if isinstance(symbol, ParseError):
        return symbol

    cursor.skip_whitespace()
    if cursor.peek() == "(":
        function = context.functions.get(symbol)
        if function is None:
            return ErrorTemplate.unknown_function(symbol, cursor.pos, context.functions)

        cursor.advance()
        argument = parse_sum(cursor, context.enter_nesting())
        if isinstance(argument, ParseError):
            return argument

        error = cursor.expect(")")
        if error is not None:
            return error
        return float(function(argument))

    constant = context.constants.get(symbol)
    if constant is None:
        return ErrorTemplate.unknown_symbol(symbol, cursor.pos, context.constants)
    return constant
