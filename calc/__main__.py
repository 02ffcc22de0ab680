"""Command-line driver: run source files, inline expressions, or a REPL."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from calc.config import get_log_level, get_options
from calc.interpreter import Interpreter
from calc.types.values import display


PROMPT = "calc> "


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calc",
        description="Evaluate S-expression calculator programs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s prog.calc                 # Run a source file
  %(prog)s -e "(+ 1 2)"              # Evaluate an expression
  %(prog)s                           # Interactive mode
  %(prog)s --compat prog.calc        # Ignore malformed builtin calls
        """,
    )
    parser.add_argument("files", nargs="*", help="source files to evaluate in order")
    parser.add_argument(
        "-e", "--expr", action="append", default=[], metavar="EXPR",
        help="evaluate EXPR after the files (may be repeated)",
    )
    parser.add_argument(
        "--compat", action="store_true",
        help="silently turn malformed builtin calls into nil",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="abort with a traceback on division by zero",
    )
    parser.add_argument("--log-level", default=None, help="logging level (default: CALC_LOG_LEVEL)")
    return parser


def repl(interp: Interpreter, stdin: TextIO, stdout: TextIO) -> int:
    """Read one line at a time; definitions persist between lines."""
    failures = 0
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        line = line.strip()
        if not line:
            continue
        if line == ":quit":
            break
        if line == ":env":
            for kind, name, value in interp.env.bindings():
                stdout.write(f"{name} ({kind}) = {display(value)}\n")
            continue
        result = interp.eval_expr(line)
        if result is None:
            failures += 1
        else:
            stdout.write(f"{display(result)}\n")
    return failures


def main(argv: Sequence[str] | None = None) -> int:
    parser = create_arg_parser()
    args = parser.parse_args(argv)
    level = (args.log_level or get_log_level()).upper()
    # getLevelName maps a known name to its int and anything else to a str
    if not isinstance(logging.getLevelName(level), int):
        parser.error(f"invalid log level: {level!r}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        options = get_options(
            strict=False if args.compat else None,
            debug=True if args.debug else None,
        )
    except ValueError as err:
        parser.error(str(err))
    interp = Interpreter(options)

    if not args.files and not args.expr:
        repl(interp, sys.stdin, sys.stdout)
        return 0

    status = 0
    for path in args.files:
        try:
            result = interp.eval_path(path)
        except OSError as err:
            print(f"calc: cannot read {path}: {err.strerror}", file=sys.stderr)
            status = 1
            continue
        if result is None:
            status = 1
    for source in args.expr:
        result = interp.eval_expr(source)
        if result is None:
            status = 1
        else:
            print(display(result))
    return status


if __name__ == "__main__":
    sys.exit(main())
