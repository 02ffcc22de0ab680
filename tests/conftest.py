import pytest

from calc.config import EvalOptions
from calc.interpreter import Interpreter, reset_default_interpreter

# Most tests run against a fresh session so bindings never leak between
# tests. Tests that hold in both error policies take the parameterized
# `any_interp` fixture and run twice:
# 1) strict mode, where malformed calls become diagnostics ["strict"]
# 2) compatibility mode, where they quietly evaluate to nil ["compat"]


@pytest.fixture(autouse=True)
def _isolate_default_session(monkeypatch):
    for var in ("CALC_STRICT", "CALC_DEBUG", "CALC_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    reset_default_interpreter()
    yield
    reset_default_interpreter()


@pytest.fixture
def interp():
    return Interpreter(EvalOptions(strict=True))


@pytest.fixture
def compat():
    return Interpreter(EvalOptions(strict=False))


@pytest.fixture
def debug_interp():
    return Interpreter(EvalOptions(strict=True, debug=True))


@pytest.fixture(params=["strict", "compat"])
def any_interp(request):
    return Interpreter(EvalOptions(strict=request.param == "strict"))
