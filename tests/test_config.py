import pytest

from calc.config import EvalOptions, get_log_level, get_options
from calc.interpreter import default_interpreter


def test_defaults():
    assert get_options() == EvalOptions(strict=True, debug=False)
    assert get_log_level() == "WARNING"


@pytest.mark.parametrize(
    "raw,expected",
    [("0", False), ("false", False), ("No", False), ("1", True), ("TRUE", True), ("on", True), ("  ", True)]
)
def test_strict_from_environment(monkeypatch, raw, expected):
    monkeypatch.setenv("CALC_STRICT", raw)
    assert get_options().strict is expected


def test_explicit_arguments_win(monkeypatch):
    monkeypatch.setenv("CALC_STRICT", "0")
    monkeypatch.setenv("CALC_DEBUG", "1")
    assert get_options(strict=True, debug=False) == EvalOptions(strict=True, debug=False)
    assert get_options() == EvalOptions(strict=False, debug=True)


def test_invalid_flag(monkeypatch):
    monkeypatch.setenv("CALC_DEBUG", "maybe")
    with pytest.raises(ValueError):
        get_options()


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("CALC_LOG_LEVEL", " debug ")
    assert get_log_level() == "DEBUG"


def test_default_session_follows_environment(monkeypatch):
    monkeypatch.setenv("CALC_STRICT", "0")
    interp = default_interpreter()
    assert interp.options.strict is False
    assert interp.env.strict is False
    assert default_interpreter() is interp
