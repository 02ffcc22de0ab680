"""Source text and the diagnostics recorded against it.

A SourceFile is created for every top-level evaluation. The lexer, the
parser and the evaluator append positioned diagnostics to it; the entry point
inspects `num_errors` afterwards and renders them.
"""

from __future__ import annotations

import bisect
import sys
from dataclasses import dataclass, field
from typing import TextIO

from calc.errors import CalcError


@dataclass(frozen=True)
class Location:
    name: str
    line: int
    column: int

    def __str__(self) -> str:
        if self.name:
            return f"{self.name}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Diagnostic:
    pos: int
    message: str


@dataclass
class SourceFile:
    name: str
    text: str
    errors: list[Diagnostic] = field(default_factory=list)
    _line_starts: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._line_starts = [0]
        for i, ch in enumerate(self.text):
            if ch == "\n":
                self._line_starts.append(i + 1)

    def add_error(self, pos: int, *parts: object) -> None:
        """Record a diagnostic at offset `pos`; parts are joined like print()."""
        self.errors.append(Diagnostic(pos, "".join(str(p) for p in parts)))

    def report(self, err: CalcError) -> None:
        """Record `err` as a diagnostic at its own position."""
        self.add_error(err.pos if err.pos is not None else 0, err.message)

    @property
    def num_errors(self) -> int:
        return len(self.errors)

    def location(self, pos: int) -> Location:
        """1-based line and column for a 0-based offset."""
        pos = max(0, min(pos, len(self.text)))
        line = bisect.bisect_right(self._line_starts, pos)
        column = pos - self._line_starts[line - 1] + 1
        return Location(self.name, line, column)

    def render(self) -> str:
        return "\n".join(
            f"{self.location(d.pos)}: {d.message}" for d in self.errors
        )

    def print_errors(self, stream: TextIO | None = None) -> None:
        if not self.errors:
            return
        out = stream if stream is not None else sys.stderr
        out.write(self.render())
        out.write("\n")
