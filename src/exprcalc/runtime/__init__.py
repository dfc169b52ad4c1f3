"""Runtime support for evaluation: symbol tables and IEEE-754 arithmetic.

Python 3.13+.
"""

from .functions import divide, ieee_unary
from .symbols import (
    DEFAULT_CONSTANTS,
    DEFAULT_FUNCTIONS,
    BuiltinFunction,
    ConstantTable,
    FunctionTable,
    UnaryFunction,
    is_symbol_name,
)

__all__ = [
    "DEFAULT_CONSTANTS",
    "DEFAULT_FUNCTIONS",
    "BuiltinFunction",
    "ConstantTable",
    "FunctionTable",
    "UnaryFunction",
    "divide",
    "ieee_unary",
    "is_symbol_name",
]
