import io

import pytest

from calc.__main__ import PROMPT, main, repl
from calc.config import EvalOptions
from calc.errors import CalcDivisionByZero
from calc.interpreter import Interpreter


def test_expression_argument(capsys):
    assert main(["-e", "(+ 1 2)", "-e", "(* 2 3)"]) == 0
    assert capsys.readouterr().out == "3\n6\n"


def test_expression_with_diagnostic_fails(capsys):
    assert main(["-e", "()"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "1:1: empty expression not allowed\n"


def test_files_share_one_session(tmp_path, capsys):
    first = tmp_path / "first.calc"
    second = tmp_path / "second.calc"
    first.write_text("(set x 2)\n", encoding="utf-8")
    second.write_text("(print (* x 21))\n", encoding="utf-8")
    assert main([str(first), str(second), "-e", "x"]) == 0
    assert capsys.readouterr().out == "42\n2\n"


def test_file_diagnostics_name_the_file(tmp_path, capsys):
    path = tmp_path / "bad.calc"
    path.write_text("(print 1)\n(1)\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err == f"{path}:2:2: first element of an expression must be a function\n"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.calc")]) == 1
    assert "cannot read" in capsys.readouterr().err


@pytest.mark.parametrize(
    "flags,expected",
    [
        ([], 1),
        (["--compat"], 0),
    ]
)
def test_compat_flag(capsys, flags, expected):
    assert main([*flags, "-e", "(+)"]) == expected


def test_debug_flag_raises_division_fault():
    with pytest.raises(CalcDivisionByZero):
        main(["--debug", "-e", "(/ 1 0)"])


def test_repl_session():
    interp = Interpreter(EvalOptions())
    stdin = io.StringIO("(set x 4)\n\nx\n(define sq (* x x))\n:env\n()\n:quit\n(print 1)\n")
    stdout = io.StringIO()
    assert repl(interp, stdin, stdout) == 1
    assert stdout.getvalue() == (
        PROMPT + "nil\n"
        + PROMPT
        + PROMPT + "4\n"
        + PROMPT + "nil\n"
        + PROMPT + "sq (function) = 16\nx (variable) = 4\n"
        + PROMPT
        + PROMPT
    )


def test_repl_stops_at_eof():
    stdout = io.StringIO()
    assert repl(Interpreter(EvalOptions()), io.StringIO("(+ 1 1)\n"), stdout) == 0
    assert stdout.getvalue() == PROMPT + "2\n" + PROMPT + "\n"


def test_main_without_arguments_starts_repl(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(+ 2 2)\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == PROMPT + "4\n" + PROMPT + "\n"


def test_invalid_log_level_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--log-level", "bogus", "-e", "1"])
    assert exc.value.code == 2
    assert "invalid log level: 'BOGUS'" in capsys.readouterr().err


@pytest.mark.parametrize(
    "var,raw,message",
    [
        ("CALC_LOG_LEVEL", "chatty", "invalid log level: 'CHATTY'"),
        ("CALC_STRICT", "maybe", "CALC_STRICT must be a boolean flag"),
    ]
)
def test_invalid_environment_is_a_usage_error(monkeypatch, capsys, var, raw, message):
    monkeypatch.setenv(var, raw)
    with pytest.raises(SystemExit) as exc:
        main(["-e", "1"])
    assert exc.value.code == 2
    assert message in capsys.readouterr().err
