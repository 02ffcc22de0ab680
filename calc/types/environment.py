"""Runtime environment for the calculator.

There is no nesting: an Environment holds three flat namespaces consulted in
a fixed order. Builtins always win over user definitions, and `define`
bindings win over `set` variables of the same name.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from calc import CalcValue
from calc.errors import CalcTypeError
from calc.types.values import Builtin, Thunk


class Environment:
    """Session-owned bindings: builtins, functions (thunks) and variables."""

    __slots__ = ("builtins", "functions", "variables", "strict")

    def __init__(self, strict: bool = True):
        self.builtins: dict[str, Builtin] = {}
        self.functions: dict[str, Thunk] = {}
        self.variables: dict[str, CalcValue] = {}
        self.strict = strict

    def register_builtin(self, builtin: Builtin) -> None:
        if not isinstance(builtin, Builtin):
            raise CalcTypeError(f"Cannot register {builtin!r} as a builtin")
        self.builtins[builtin.name] = builtin

    def update(self, mapping: dict[str, Builtin]) -> None:
        """Bulk-register builtins keyed by their source name."""
        for name, builtin in mapping.items():
            if name != builtin.name:
                raise CalcTypeError(f"Builtin {builtin.name} registered as {name}")
            self.register_builtin(builtin)

    def resolve(self, name: str) -> Optional[CalcValue]:
        """Look up `name` in builtins, then functions, then variables.

        Returns None when the name is bound nowhere.
        """
        if name in self.builtins:
            return self.builtins[name]
        if name in self.functions:
            return self.functions[name]
        if name in self.variables:
            return self.variables[name]
        return None

    def define(self, name: str, value: CalcValue) -> None:
        """Bind `name` in the functions namespace to a thunk returning `value`."""
        self.functions[name] = Thunk(name, value)

    def set(self, name: str, value: CalcValue) -> None:
        """Bind `name` in the variables namespace to `value` itself."""
        self.variables[name] = value

    def bindings(self) -> Iterator[tuple[str, str, CalcValue]]:
        """Yield (namespace, name, value) for every user binding."""
        for name, thunk in self.functions.items():
            yield "function", name, thunk.value
        for name, value in self.variables.items():
            yield "variable", name, value

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for kind, name, value in self.bindings():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{name} ({kind}): {value!r}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return (
            f"<Environment builtins={len(self.builtins)} "
            f"functions={len(self.functions)} variables={len(self.variables)}>"
        )
