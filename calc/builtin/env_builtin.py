"""Built-in functions for the calculator runtime environment.

Every builtin takes the session Environment and the list of already
evaluated arguments. Malformed calls go through `_malformed`: in strict mode
they raise a CalcError the evaluator reports at the calling expression, in
compatibility mode they quietly produce Nothing.
"""
from __future__ import annotations

import logging
from typing import Callable

from calc import CalcValue
from calc.errors import CalcArityError, CalcDivisionByZero, CalcError, CalcTypeError
from calc.types.environment import Environment
from calc.types.nothing import Nothing
from calc.types.values import Builtin, Symbol, display, is_integer, wrap_int64


logger = logging.getLogger("Builtins")


def _malformed(env: Environment, error: CalcError) -> CalcValue:
    if env.strict:
        raise error
    logger.debug("ignoring malformed call: %s", error.message)
    return Nothing


def _integer_fold(
    name: str, step: Callable[[int, int], int], env: Environment, args: list[CalcValue]
) -> CalcValue:
    """Left fold of `step` over integer arguments.

    No arguments give Nothing, a single integer is returned unchanged, and a
    non-integer first argument counts as 0 when more arguments follow.
    """
    if not args:
        return _malformed(env, CalcArityError(f"{name} requires at least 1 argument"))
    first = args[0]
    if len(args) == 1:
        if is_integer(first):
            return first
        return _malformed(env, CalcTypeError(f"{name} accepts integers only, got {display(first)}"))
    if is_integer(first):
        result = first
    elif env.strict:
        raise CalcTypeError(f"{name} accepts integers only, got {display(first)}")
    else:
        result = 0
    for x in args[1:]:
        if not is_integer(x):
            return _malformed(env, CalcTypeError(f"{name} accepts integers only, got {display(x)}"))
        result = wrap_int64(step(result, x))
    return result


# -------------------------------
# Arithmetic
# -------------------------------
def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise CalcDivisionByZero("division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _truncating_mod(a: int, b: int) -> int:
    """Remainder of _truncating_div; takes the sign of the dividend."""
    return a - b * _truncating_div(a, b)


def add(env: Environment, args: list[CalcValue]) -> CalcValue:
    return _integer_fold("+", lambda a, b: a + b, env, args)


def sub(env: Environment, args: list[CalcValue]) -> CalcValue:
    return _integer_fold("-", lambda a, b: a - b, env, args)


def mul(env: Environment, args: list[CalcValue]) -> CalcValue:
    return _integer_fold("*", lambda a, b: a * b, env, args)


def div(env: Environment, args: list[CalcValue]) -> CalcValue:
    return _integer_fold("/", _truncating_div, env, args)


def mod(env: Environment, args: list[CalcValue]) -> CalcValue:
    return _integer_fold("%", _truncating_mod, env, args)


# -------------------------------
# Comparison
# -------------------------------
# Each step compares the running result, not the previous operand:
# (< 1 2 3) is (< (< 1 2) 3).
def _truth(b: bool) -> int:
    return 1 if b else 0


def equals(env: Environment, args: list[CalcValue]) -> CalcValue:
    return _integer_fold("=", lambda a, b: _truth(a == b), env, args)


def lt(env: Environment, args: list[CalcValue]) -> CalcValue:
    return _integer_fold("<", lambda a, b: _truth(a < b), env, args)


def lte(env: Environment, args: list[CalcValue]) -> CalcValue:
    return _integer_fold("<=", lambda a, b: _truth(a <= b), env, args)


def gt(env: Environment, args: list[CalcValue]) -> CalcValue:
    return _integer_fold(">", lambda a, b: _truth(a > b), env, args)


def gte(env: Environment, args: list[CalcValue]) -> CalcValue:
    return _integer_fold(">=", lambda a, b: _truth(a >= b), env, args)


def not_equals(env: Environment, args: list[CalcValue]) -> CalcValue:
    return _integer_fold("<>", lambda a, b: _truth(a != b), env, args)


# -------------------------------
# Bindings
# -------------------------------
def _binding_args(
    name: str, env: Environment, args: list[CalcValue]
) -> tuple[Symbol, CalcValue] | None:
    """Validate (NAME value) for define/set; None when silently rejected."""
    if len(args) != 2:
        _malformed(env, CalcArityError(f"{name} requires exactly 2 arguments, got {len(args)}"))
        return None
    target, value = args
    if not isinstance(target, Symbol):
        _malformed(env, CalcTypeError(
            f"{name} requires an identifier as its first argument, got {display(target)}"
        ))
        return None
    if isinstance(value, Builtin) and value.is_operator:
        _malformed(env, CalcTypeError(f"{name} cannot bind {target} to operator {value.name}"))
        return None
    return target, value


def define(env: Environment, args: list[CalcValue]) -> CalcValue:
    """(define name value): bind a thunk returning the already evaluated value."""
    checked = _binding_args("define", env, args)
    if checked is not None:
        target, value = checked
        logger.debug("define %s = %r", target, value)
        env.define(target.id, value)
    return Nothing


def set_builtin(env: Environment, args: list[CalcValue]) -> CalcValue:
    """(set name value): store the value itself as a variable."""
    checked = _binding_args("set", env, args)
    if checked is not None:
        target, value = checked
        logger.debug("set %s = %r", target, value)
        env.set(target.id, value)
    return Nothing


# -------------------------------
# Control and output
# -------------------------------
def if_builtin(env: Environment, args: list[CalcValue]) -> CalcValue:
    """(if cond then else): both branches arrive already evaluated."""
    if len(args) != 3:
        return _malformed(env, CalcArityError(f"if requires exactly 3 arguments, got {len(args)}"))
    cond, then_value, else_value = args
    if not is_integer(cond):
        return _malformed(env, CalcTypeError(f"if condition must be an integer, got {display(cond)}"))
    return then_value if cond != 0 else else_value


def print_builtin(env: Environment, args: list[CalcValue]) -> CalcValue:
    """Write the arguments separated by spaces, then a newline."""
    print(" ".join(display(a) for a in args))
    return Nothing


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Builtin] = {
    b.name: b
    for b in (
        Builtin("+", add),
        Builtin("-", sub),
        Builtin("*", mul),
        Builtin("/", div),
        Builtin("%", mod),
        Builtin("=", equals),
        Builtin("<", lt),
        Builtin("<=", lte),
        Builtin(">", gt),
        Builtin(">=", gte),
        Builtin("<>", not_equals),
        Builtin("define", define, binding=True),
        Builtin("set", set_builtin, binding=True),
        Builtin("if", if_builtin),
        Builtin("print", print_builtin),
    )
}


def register(env: Environment) -> None:
    env.update(BUILTINS)
