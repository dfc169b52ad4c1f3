"""Command-line front end: REPL, one-shot evaluation and self-test.

Usage:
    exprcalc                       # interactive; empty line exits
    exprcalc -e "sqrt(2)"          # evaluate once
    exprcalc --self-test           # run the builtin case table
    exprcalc -e "foo(1)" --format rust

Exit Codes:
    0   Success (or REPL ended normally)
    1   Expression failed to evaluate, or a self-test case failed

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from collections.abc import Sequence
from typing import TextIO

from exprcalc.constants import DEFAULT_PROMPT, MAX_DEPTH
from exprcalc.diagnostics import DiagnosticFormatter, OutputFormat
from exprcalc.syntax import ExpressionParser

__all__ = ["SELF_TEST_CASES", "main", "run_once", "run_repl", "run_self_test"]

logger = logging.getLogger(__name__)

# (input, expected value). Compared with ==, so every expected value must be
# computed exactly as the evaluator computes it.
SELF_TEST_CASES: tuple[tuple[str, float], ...] = (
    # Constants
    ("1", 1.0),
    ("1.234", 1.234),
    (".1", 0.1),
    ("-2", -2.0),
    ("-.1", -0.1),
    ("1e9", 1e9),
    ("2e-8", 2e-8),
    ("3e+7", 3e7),
    ("456.789e+5", 456.789e5),
    # Symbols
    ("e", math.exp(1)),
    ("pi", math.atan(1) * 4),
    # Addition
    ("1+2", 3.0),
    ("3+e", 3.0 + math.exp(1)),
    # Subtraction
    ("4-5", -1.0),
    # Multiplication
    ("2*3", 6.0),
    # Parenthesized expressions
    ("(3+4)", 7.0),
    ("(3+4)*(2+3)", 35.0),
    # Addition combined with unary negation
    ("1+-2", -1.0),
    # White space
    ("\t 1  + ( 2 * 10 )    ", 21.0),
    # sqrt
    ("sqrt(4)", 2.0),
    ("sqrt((3+4)*(2+3))", math.sqrt(35)),
    ("sqrt(1 + 2 )", math.sqrt(3)),
    # trig
    ("cos(pi)", -1.0),
    ("sin(0)", 0.0),
)


def run_self_test(
    parser: ExpressionParser,
    cases: Sequence[tuple[str, float]] = SELF_TEST_CASES,
    stdout: TextIO | None = None,
) -> bool:
    """Evaluate each case and print ``"input" ==> value OK|FAILED``.

    Args:
        parser: Evaluator under test
        cases: (input, expected) pairs
        stdout: Output stream (default: sys.stdout)

    Returns:
        True if every case produced exactly its expected value
    """
    out = stdout if stdout is not None else sys.stdout
    success = True
    for source, expected in cases:
        value, error = parser.evaluate(source)
        if error is not None:
            print(f"{source!r} ==> FAILED: {error.format_error()}", file=out)
            success = False
        elif value == expected:
            print(f"{source!r} ==> {value} OK", file=out)
        else:
            print(f"{source!r} ==> {value} FAILED: expected {expected}", file=out)
            success = False
    logger.debug("Self-test finished: %s", "passed" if success else "failed")
    return success


def run_once(
    parser: ExpressionParser,
    source: str,
    formatter: DiagnosticFormatter,
    stdout: TextIO | None = None,
) -> int:
    """Evaluate a single expression and print the value or the diagnostic.

    Returns:
        Exit code: 0 on success, 1 on a parse error
    """
    out = stdout if stdout is not None else sys.stdout
    value, error = parser.evaluate(source)
    if error is not None:
        if formatter.output_format is OutputFormat.CARET:
            print(source, file=out)
        print(formatter.format_parse_error(error, source), file=out)
        return 1
    print(value, file=out)
    return 0


def run_repl(
    parser: ExpressionParser,
    formatter: DiagnosticFormatter,
    prompt: str = DEFAULT_PROMPT,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Read-eval-print loop.

    Reads one line per prompt until an empty line or end of input. Errors
    are printed with the caret aligned under the echoed input, i.e. offset
    by the prompt width.

    Returns:
        Exit code (always 0)
    """
    inp = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout

    print("Type an expression and press return to evaluate.", file=out)
    print("Enter an empty line to exit.", file=out)

    while True:
        out.write(prompt)
        out.flush()
        line = inp.readline()
        if not line:
            # End of input without a newline (e.g. Ctrl-D)
            print(file=out)
            break

        line = line.removesuffix("\n").removesuffix("\r")
        if not line:
            break

        value, error = parser.evaluate(line)
        if error is not None:
            print(formatter.format_parse_error(error, line, indent=len(prompt)), file=out)
        else:
            print(value, file=out)

    return 0


def _build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        prog="exprcalc",
        description="Evaluate arithmetic expressions over floating point numbers.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive session:
  exprcalc

  # Evaluate once:
  exprcalc -e "sqrt((3+4)*(2+3))"

  # Machine-readable diagnostics:
  exprcalc -e "foo(1)" --format json
""",
    )
    arg_parser.add_argument(
        "-e",
        "--expr",
        help="Evaluate EXPR, print the result and exit",
    )
    arg_parser.add_argument(
        "--self-test",
        action="store_true",
        help="Run the builtin evaluation cases and exit",
    )
    arg_parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.CARET.value,
        help="Diagnostic output format (default: caret)",
    )
    arg_parser.add_argument(
        "--prompt",
        default=DEFAULT_PROMPT,
        help=f"REPL prompt (default: {DEFAULT_PROMPT!r})",
    )
    arg_parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_DEPTH,
        help=f"Maximum nesting depth (default: {MAX_DEPTH})",
    )
    arg_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return arg_parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = _build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    parser = ExpressionParser(max_nesting_depth=args.max_depth)
    formatter = DiagnosticFormatter(output_format=OutputFormat(args.format))

    if args.self_test:
        print("Running test cases ...")
        if run_self_test(parser):
            print("All tests succeeded.")
            return 0
        print("One or more tests failed.")
        return 1

    if args.expr is not None:
        return run_once(parser, args.expr, formatter)

    return run_repl(parser, formatter, prompt=args.prompt)


if __name__ == "__main__":
    sys.exit(main())
