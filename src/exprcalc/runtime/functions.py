"""IEEE-754 arithmetic on Python floats.

Python's float operators and ``math`` functions raise on division by zero,
domain errors and overflow. The evaluator instead yields the IEEE special
value (inf or nan), as C doubles do.

Python 3.13+. Zero external dependencies.
"""

import math
from collections.abc import Callable
from functools import wraps

__all__ = ["divide", "ieee_unary"]


def divide(left: float, right: float) -> float:
    """Divide with IEEE-754 semantics for a zero divisor.

    Examples:
        >>> divide(1.0, 0.0)
        inf
        >>> divide(-1.0, 0.0)
        -inf
        >>> divide(1.0, -0.0)
        -inf
        >>> divide(0.0, 0.0)
        nan
    """
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def ieee_unary(func: Callable[[float], float]) -> Callable[[float], float]:
    """Wrap a ``math`` function to return nan/inf instead of raising.

    ValueError (domain error) becomes nan; OverflowError becomes inf.

    Example:
        >>> ieee_unary(math.sqrt)(-1.0)
        nan
    """

    @wraps(func)
    def wrapper(value: float) -> float:
        try:
            return func(value)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf

    return wrapper
