# Core type aliases for the calculator's data model.
# Runtime values are plain Python objects: int for integers, the Nothing
# singleton, and the small classes in calc.types.values for callables and
# unresolved identifiers.

from __future__ import annotations

from typing import Any

# Runtime value alias
CalcValue = Any


def eval_expr(source: str) -> CalcValue | None:
    """Evaluate `source` in the process-wide default session."""
    from calc.interpreter import default_interpreter
    return default_interpreter().eval_expr(source)


def eval_file(name: str, source: str) -> CalcValue | None:
    """Evaluate `source`, attributing diagnostics to `name`, in the default session."""
    from calc.interpreter import default_interpreter
    return default_interpreter().eval_file(name, source)
