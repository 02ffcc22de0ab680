from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from calc import CalcValue
from calc.config import EvalOptions, get_options
from calc.builtin.env_builtin import register
from calc.evaluation.evaluator import Evaluator
from calc.reader.parser import parse_file
from calc.reader.source import SourceFile
from calc.types.environment import Environment


class Interpreter:
    """
    Orchestrates parsing and evaluating calculator source.
    Maintains one Environment across calls, so bindings made by `define`
    and `set` are visible to every later evaluation in the same session.
    """

    def __init__(
        self,
        options: EvalOptions | None = None,
        *,
        stderr: TextIO | None = None,
    ):
        self.options: EvalOptions = options if options is not None else get_options()
        self.env: Environment = Environment(strict=self.options.strict)
        register(self.env)
        # None means whatever sys.stderr is at the time of reporting
        self.stderr = stderr
        self._logger = logging.getLogger("CalcInterpreter")

    def eval_expr(self, source: str) -> CalcValue | None:
        """Evaluate an anonymous source string."""
        return self.eval_file("", source)

    def eval_file(self, name: str, source: str) -> CalcValue | None:
        """Parse then evaluate `source`.

        Diagnostics are written to stderr and the result is None whenever any
        were recorded, during parsing or during evaluation.
        """
        src = SourceFile(name, source)
        tree = parse_file(src)
        if src.num_errors > 0:
            self._logger.debug("%d syntax error(s) in %r", src.num_errors, name)
            src.print_errors(self.stderr)
            return None
        result = Evaluator(self.env, src, self.options).eval(tree)
        if src.num_errors > 0:
            self._logger.debug("%d evaluation error(s) in %r", src.num_errors, name)
            src.print_errors(self.stderr)
            return None
        return result

    def eval_path(self, path: str | Path) -> CalcValue | None:
        """Read a UTF-8 source file and evaluate it under its own name."""
        p = Path(path)
        return self.eval_file(str(p), p.read_text(encoding="utf-8"))


_default: Interpreter | None = None


def default_interpreter() -> Interpreter:
    """The process-wide session behind calc.eval_expr / calc.eval_file."""
    global _default
    if _default is None:
        _default = Interpreter()
    return _default


def reset_default_interpreter() -> None:
    global _default
    _default = None
