"""Syntax tree produced by the parser and walked by the evaluator.

Every node carries `pos`, the 0-based offset of its first character in the
SourceFile it was parsed from. The evaluator treats the tree as read-only.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Node:
    pos: int


@dataclass(frozen=True)
class Identifier(Node):
    lit: str


@dataclass(frozen=True)
class Number(Node):
    val: int


@dataclass(frozen=True)
class Operator(Node):
    val: str


@dataclass(frozen=True)
class Expression(Node):
    nodes: tuple[Node, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class File(Node):
    nodes: tuple[Node, ...] = field(default_factory=tuple)
