"""Quickstart example for exprcalc.

This example demonstrates basic usage of exprcalc for evaluating
arithmetic expressions.

Note: evaluate() never raises for bad input. Always check the error half of
the returned pair; calculate() is the raising alternative.
"""

from exprcalc import CalcSyntaxError, DiagnosticCode, calculate, evaluate
from exprcalc.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Simple evaluation
print("=" * 50)
print("Example 1: Simple Evaluation")
print("=" * 50)

value, error = evaluate("(3+4)*(2+3)")
print(value)
# Output: 35.0

value, _ = evaluate("sqrt((3+4)*(2+3))")
print(value)
# Output: 5.916079783099616

value, _ = evaluate("cos(pi)")
print(value)
# Output: -1.0

# Example 2: Grammar quirks
print("\n" + "=" * 50)
print("Example 2: Grammar Quirks")
print("=" * 50)

# The right operand of '*' is a whole sum
value, _ = evaluate("2*3+4")
print(value)
# Output: 14.0

# A sum takes one operator; group the rest
_, error = evaluate("1+2+3")
print(error.code.name, error.position)
# Output: UNEXPECTED_TRAILING_INPUT 3

value, _ = evaluate("(1+2)+3")
print(value)
# Output: 6.0

# Example 3: IEEE special values
print("\n" + "=" * 50)
print("Example 3: IEEE Special Values")
print("=" * 50)

for source in ("1/0", "-1/0", "0/0", "sqrt(-1)", "1e999"):
    value, _ = evaluate(source)
    print(f"{source:>10} = {value}")
# Output:
#        1/0 = inf
#       -1/0 = -inf
#        0/0 = nan
#   sqrt(-1) = nan
#      1e999 = inf

# Example 4: Error reporting
print("\n" + "=" * 50)
print("Example 4: Error Reporting")
print("=" * 50)

source = "sqrt(2) + tau"
_, error = evaluate(source)
if error is not None and error.code is DiagnosticCode.UNKNOWN_SYMBOL:
    print(source)
    print(error.format_with_pointer())
# Output:
# sqrt(2) + tau
#              ^
# error (position = 13): Unknown symbol "tau"

rust = DiagnosticFormatter(output_format=OutputFormat.RUST)
print(rust.format_parse_error(error, source))
# Output:
# error[UNKNOWN_SYMBOL]: Unknown symbol "tau"
#   --> line 1, column 14
#   = help: Known constants are: e, pi

# Example 5: Raising API
print("\n" + "=" * 50)
print("Example 5: Raising API")
print("=" * 50)

print(calculate("1+-2"))
# Output: -1.0

try:
    calculate("foo(1)")
except CalcSyntaxError as exc:
    print(f"Failed at position {exc.position}: {exc.error.message}")
# Output: Failed at position 3: Unknown function "foo"
