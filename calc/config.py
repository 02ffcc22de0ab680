from __future__ import annotations
import os
from dataclasses import dataclass


_TRUE = ('1', 'true', 'yes', 'on')
_FALSE = ('0', 'false', 'no', 'off')

# Defaults
_DEFAULT_STRICT = True
_DEFAULT_DEBUG = False
_DEFAULT_LOG_LEVEL = 'WARNING'


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{var} must be a boolean flag, got {raw!r}")


def get_log_level() -> str:
    raw = os.environ.get('CALC_LOG_LEVEL')
    if not raw or not raw.strip():
        return _DEFAULT_LOG_LEVEL
    return raw.strip().upper()


@dataclass(frozen=True)
class EvalOptions:
    """Evaluation policy for one interpreter session.

    strict: report every malformed builtin call and every unbound identifier
        as a diagnostic. When False, those cases quietly produce Nothing and
        unbound identifiers only fail when they reach the top level.
    debug: let division by zero escape as a CalcDivisionByZero fault instead
        of becoming a diagnostic.
    """
    strict: bool = _DEFAULT_STRICT
    debug: bool = _DEFAULT_DEBUG


def get_options(strict: bool | None = None, debug: bool | None = None) -> EvalOptions:
    """Build options from CALC_STRICT / CALC_DEBUG; explicit arguments win."""
    if strict is None:
        strict = flag_from_env('CALC_STRICT', _DEFAULT_STRICT)
    if debug is None:
        debug = flag_from_env('CALC_DEBUG', _DEFAULT_DEBUG)
    return EvalOptions(strict=strict, debug=debug)
