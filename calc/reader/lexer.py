"""Lexer for calculator source.

Yields (token_type, token_value, pos) tuples. Illegal input is recorded on
the SourceFile and skipped so that one pass reports every lexical error.

Token types:
    - lparen / rparen
    - number      decimal digits, optionally with a leading '-'
    - operator    + - * / % = < <= > >= <>
    - identifier  letters, digits and '_', not starting with a digit
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from calc.errors import CalcSyntaxError
from calc.reader.source import SourceFile


OPERATORS = frozenset({"+", "-", "*", "/", "%", "=", "<", "<=", ">", ">=", "<>"})

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<number>-?[0-9]+)"  # a '-' glued to a digit is a sign, not an operator
    r"|(?P<operator><=|>=|<>|[-+*/%=<>])"  # longest operators first
    r"|(?P<identifier>[A-Za-z_][A-Za-z0-9_]*)"
)

# Characters allowed to follow a number or identifier
DELIMITERS = frozenset("();")


class Token(NamedTuple):
    type: str
    value: str
    pos: int


def _delimited(source: str, end: int) -> bool:
    return end >= len(source) or source[end].isspace() or source[end] in DELIMITERS


def lex(src: SourceFile) -> Iterator[Token]:
    """Token generator over `src.text`; errors are added to `src`."""
    source = src.text
    pos = 0
    n = len(source)

    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue

        m = TOKEN_RE.match(source, pos)
        if not m:
            src.report(CalcSyntaxError(f"illegal character {source[pos]!r}", pos))
            pos += 1
            continue

        kind = m.lastgroup
        value = m.group(kind)
        end = m.end()
        if kind == "comment":
            pos = end
            continue

        if kind in ("number", "identifier") and not _delimited(source, end):
            # swallow the whole malformed word, e.g. 12ab
            stop = end
            while not _delimited(source, stop):
                stop += 1
            src.report(CalcSyntaxError(f"illegal {kind} {source[pos:stop]!r}", pos))
            pos = stop
            continue

        yield Token(kind, value, pos)
        pos = end
