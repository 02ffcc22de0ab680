"""Runtime values of the calculator language.

Integers are plain Python ints and Nothing is a singleton (see nothing.py).
The classes here cover the remaining variants: callables (builtins and the
thunks created by `define`), the name handed to a binding form, and the
sentinel produced when an identifier cannot be resolved.
"""

from __future__ import annotations

import sys
from typing import Callable, TYPE_CHECKING

from calc import CalcValue
from calc.errors import CalcArityError

if TYPE_CHECKING:
    from calc.types.environment import Environment


INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def is_integer(value: CalcValue) -> bool:
    # bool is an int subclass but never a calc value
    return isinstance(value, int) and not isinstance(value, bool)


def wrap_int64(value: int) -> int:
    """Reduce an int to the signed 64-bit range, two's complement style."""
    value &= (1 << 64) - 1
    if value > INT64_MAX:
        value -= 1 << 64
    return value


class Symbol:
    """The name argument of a binding form, e.g. `x` in (set x 5)."""

    __slots__ = ("id", "pos")

    def __init__(self, name: str, pos: int = 0):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)
        self.pos = pos

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class UnresolvedIdentifier:
    """Sentinel for an identifier with no binding; only checked at top level."""

    __slots__ = ("name", "pos")

    def __init__(self, name: str, pos: int):
        self.name = name
        self.pos = pos

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, UnresolvedIdentifier)
            and self.name == other.name
            and self.pos == other.pos
        )

    def __hash__(self) -> int:
        return hash((self.name, self.pos))

    def __repr__(self):
        return f"UnresolvedIdentifier({self.name!r}, {self.pos})"


BuiltinFn = Callable[["Environment", list[CalcValue]], CalcValue]


class Builtin:
    """A primitive operation implemented in Python.

    `binding` marks the forms (define, set) whose first argument names a
    binding instead of being resolved.
    """

    __slots__ = ("name", "fn", "binding")

    def __init__(self, name: str, fn: BuiltinFn, binding: bool = False):
        self.name = name
        self.fn = fn
        self.binding = binding

    def __call__(self, env: Environment, args: list[CalcValue]) -> CalcValue:
        return self.fn(env, args)

    @property
    def is_operator(self) -> bool:
        return not self.name.isidentifier()

    def __repr__(self):
        return f"<builtin {self.name}>"


class Thunk:
    """Zero-argument callable created by `define`; returns a fixed value."""

    __slots__ = ("name", "value")

    def __init__(self, name: str, value: CalcValue):
        self.name = name
        self.value = value

    def __call__(self, env: Environment, args: list[CalcValue]) -> CalcValue:
        if args and env.strict:
            raise CalcArityError(f"{self.name} takes no arguments, got {len(args)}")
        return self.value

    def __repr__(self):
        return f"<function {self.name}>"


def is_callable(value: CalcValue) -> bool:
    return isinstance(value, (Builtin, Thunk))


def display(value: CalcValue) -> str:
    """Text written by `print` for a value."""
    if isinstance(value, UnresolvedIdentifier):
        return value.name
    if isinstance(value, Symbol):
        return value.id
    return repr(value)
