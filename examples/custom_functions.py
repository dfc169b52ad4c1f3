"""Custom Functions Example - Demonstrating custom symbol tables.

The builtin tables hold the constants e and pi and the functions cos, sin
and sqrt. This example shows how to extend them for domain-specific needs:

1. Extra constants (tau, golden ratio)
2. Extra functions with IEEE-754 error semantics via ieee_unary()
3. A parser restricted to a custom table (no builtins)
4. Unit conversion helpers

Python 3.13+.
"""

from __future__ import annotations

import math

from exprcalc import ConstantTable, ExpressionParser, FunctionTable
from exprcalc.runtime import DEFAULT_CONSTANTS, DEFAULT_FUNCTIONS, ieee_unary


# Example 4: Unit conversion
def CELSIUS(fahrenheit: float) -> float:  # pylint: disable=invalid-name
    """Convert Fahrenheit to Celsius."""
    return (fahrenheit - 32.0) * 5.0 / 9.0


def RADIANS(degrees: float) -> float:  # pylint: disable=invalid-name
    """Convert degrees to radians."""
    return math.radians(degrees)


if __name__ == "__main__":
    # Example 1: Extra constants
    print("=" * 60)
    print("Example 1: Extra Constants")
    print("=" * 60)

    constants = DEFAULT_CONSTANTS.with_constant("tau", 2 * math.pi).with_constant(
        "phi", (1 + math.sqrt(5)) / 2
    )
    parser = ExpressionParser(constants=constants)

    for source in ("tau/2", "(phi*phi)-phi", "cos(tau)"):
        value, error = parser.evaluate(source)
        print(f"{source:>14} = {value if error is None else error.format_error()}")

    # Example 2: Extra functions
    print("\n" + "=" * 60)
    print("Example 2: Extra Functions")
    print("=" * 60)

    functions = (
        DEFAULT_FUNCTIONS.with_function("ln", ieee_unary(math.log))
        .with_function("exp", ieee_unary(math.exp))
        .with_function("tan", ieee_unary(math.tan))
    )
    parser = ExpressionParser(functions=functions)

    for source in ("ln(e)", "exp(1000)", "ln(0)", "tan(pi/4)"):
        value, _ = parser.evaluate(source)
        print(f"{source:>14} = {value}")
    # ln(0) is nan and exp(1000) is inf rather than an exception

    # Example 3: Restricted parser
    print("\n" + "=" * 60)
    print("Example 3: Restricted Parser")
    print("=" * 60)

    restricted = ExpressionParser(
        constants=ConstantTable({"rate": 0.07}),
        functions=FunctionTable(),
    )
    for source in ("1000*(1+rate)", "sqrt(rate)", "pi"):
        value, error = restricted.evaluate(source)
        if error is None:
            print(f"{source:>14} = {value}")
        else:
            print(f"{source:>14} -> {error.code.name}: {error.message}")

    # Example 4: Unit conversion
    print("\n" + "=" * 60)
    print("Example 4: Unit Conversion")
    print("=" * 60)

    units = ExpressionParser(
        functions=DEFAULT_FUNCTIONS.with_function("celsius", CELSIUS).with_function(
            "radians", RADIANS
        )
    )
    for source in ("celsius(212)", "sin(radians(90))"):
        value, _ = units.evaluate(source)
        print(f"{source:>18} = {value}")
