"""Symbol tables consulted by the Identifier production.

Two immutable mappings:
    - ConstantTable: symbol name -> float
    - FunctionTable: symbol name -> unary real function

The builtin functions form a closed capability set (BuiltinFunction). Tables
are populated once and never mutated; with_constant() / with_function()
return derived tables, which lets tests substitute individual entries.
Tables are safe to share between parsers and threads.

Python 3.13+. Zero external dependencies.
"""

import logging
import math
from collections.abc import Callable, Iterator, Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import TypeAlias

from exprcalc.constants import ASCII_DIGITS, ASCII_LETTERS
from exprcalc.runtime.functions import ieee_unary

__all__ = [
    "DEFAULT_CONSTANTS",
    "DEFAULT_FUNCTIONS",
    "BuiltinFunction",
    "ConstantTable",
    "FunctionTable",
    "UnaryFunction",
    "is_symbol_name",
]

logger = logging.getLogger(__name__)

UnaryFunction: TypeAlias = Callable[[float], float]


def is_symbol_name(name: str) -> bool:
    """Check name against the Symbol grammar: alpha alphanumeric*.

    Examples:
        >>> is_symbol_name("pi")
        True
        >>> is_symbol_name("log10")
        True
        >>> is_symbol_name("2pi")
        False
    """
    if not name or name[0] not in ASCII_LETTERS:
        return False
    return all(ch in ASCII_LETTERS or ch in ASCII_DIGITS for ch in name)


def _require_symbol_name(name: object) -> str:
    if not isinstance(name, str) or not is_symbol_name(name):
        msg = f"Invalid symbol name {name!r}: must match [a-zA-Z][a-zA-Z0-9]*"
        raise ValueError(msg)
    return name


class BuiltinFunction(StrEnum):
    """The builtin unary operations.

    Members are callable and return nan/inf where ``math`` would raise.

    Example:
        >>> BuiltinFunction.SQRT(4.0)
        2.0
        >>> BuiltinFunction("cos") is BuiltinFunction.COS
        True
    """

    COS = "cos"
    SIN = "sin"
    SQRT = "sqrt"

    def __call__(self, value: float) -> float:
        """Apply the operation to value."""
        return _BUILTIN_IMPLEMENTATIONS[self](value)


_BUILTIN_IMPLEMENTATIONS: dict[BuiltinFunction, UnaryFunction] = {
    BuiltinFunction.COS: ieee_unary(math.cos),
    BuiltinFunction.SIN: ieee_unary(math.sin),
    BuiltinFunction.SQRT: ieee_unary(math.sqrt),
}


class ConstantTable(Mapping[str, float]):
    """Immutable mapping from symbol name to constant value.

    Example:
        >>> table = ConstantTable({"tau": 6.283185307179586})
        >>> "tau" in table
        True
        >>> table.with_constant("phi", 1.618)["phi"]
        1.618
        >>> "phi" in table  # Original unchanged
        False
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, float] | None = None) -> None:
        """Build table from entries.

        Args:
            entries: Name -> value pairs (default: empty)

        Raises:
            ValueError: If a name does not match the Symbol grammar
        """
        validated = {
            _require_symbol_name(name): float(value) for name, value in (entries or {}).items()
        }
        self._entries: Mapping[str, float] = MappingProxyType(validated)

    def __getitem__(self, name: str) -> float:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"ConstantTable(names={sorted(self._entries)})"

    def with_constant(self, name: str, value: float) -> "ConstantTable":
        """Return a new table with name bound to value.

        Args:
            name: Symbol name (added or replaced)
            value: Constant value

        Returns:
            New ConstantTable; this table is unchanged
        """
        logger.debug("Deriving constant table with %s = %r", name, value)
        return ConstantTable({**self._entries, name: value})


class FunctionTable(Mapping[str, UnaryFunction]):
    """Immutable mapping from symbol name to unary real function.

    Example:
        >>> table = FunctionTable.builtin()
        >>> sorted(table)
        ['cos', 'sin', 'sqrt']
        >>> table["sqrt"](9.0)
        3.0
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, UnaryFunction] | None = None) -> None:
        """Build table from entries.

        Args:
            entries: Name -> callable pairs (default: empty)

        Raises:
            ValueError: If a name does not match the Symbol grammar
            TypeError: If a value is not callable
        """
        validated: dict[str, UnaryFunction] = {}
        for name, func in (entries or {}).items():
            if not callable(func):
                msg = f"Function {name!r} must be callable, got {type(func).__name__}"
                raise TypeError(msg)
            validated[_require_symbol_name(name)] = func
        self._entries: Mapping[str, UnaryFunction] = MappingProxyType(validated)

    @classmethod
    def builtin(cls) -> "FunctionTable":
        """Create table containing every BuiltinFunction under its name."""
        return cls({member.value: member for member in BuiltinFunction})

    def __getitem__(self, name: str) -> UnaryFunction:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"FunctionTable(names={sorted(self._entries)})"

    def with_function(self, name: str, func: UnaryFunction) -> "FunctionTable":
        """Return a new table with name bound to func.

        Args:
            name: Symbol name (added or replaced)
            func: Unary real function

        Returns:
            New FunctionTable; this table is unchanged
        """
        logger.debug("Deriving function table with %s -> %r", name, func)
        return FunctionTable({**self._entries, name: func})


# Shared read-only defaults. Computed once, so lookups are bit-identical
# across evaluations.
DEFAULT_CONSTANTS: ConstantTable = ConstantTable({
    "e": math.exp(1),
    "pi": math.atan(1) * 4,
})

DEFAULT_FUNCTIONS: FunctionTable = FunctionTable.builtin()
