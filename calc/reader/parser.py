"""Parser turning the token stream into a File syntax tree.

Syntax errors never raise out of the parser: each one is built as a
CalcSyntaxError, reported to the SourceFile, and parsing resumes. The caller
sees every error of a source in one pass and checks `src.num_errors` before
evaluating.
"""

from __future__ import annotations

from typing import Iterator, Optional

from calc.errors import CalcSyntaxError
from calc.reader.ast import Expression, File, Identifier, Node, Number, Operator
from calc.reader.lexer import Token, lex
from calc.reader.source import SourceFile
from calc.types.values import INT64_MAX, INT64_MIN


class TokenStream:
    def __init__(self, src: SourceFile, token_iter: Iterator[Token]):
        self.src = src
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def _parse_atom(self, tok: Token) -> Node:
        if tok.type == "number":
            val = int(tok.value)
            if not INT64_MIN <= val <= INT64_MAX:
                self.src.report(CalcSyntaxError(f"integer literal out of range: {tok.value}", tok.pos))
                val = 0
            return Number(tok.pos, val)

        if tok.type == "identifier":
            return Identifier(tok.pos, tok.value)

        if tok.type == "operator":
            return Operator(tok.pos, tok.value)

        # The lexer only produces the token types handled here and in parse_expr
        raise AssertionError(f"Unknown token: {tok.type} {tok.value}")

    def parse_expr(self) -> Optional[Node]:
        """Parse one node; None at end of input or after a skipped stray ')'.

        Open parens are kept on an explicit stack, so nesting depth is not
        limited by the Python call stack.
        """
        # (open paren token, children so far) for every unclosed '('
        stack: list[tuple[Token, list[Node]]] = []
        while True:
            tok = self.advance()
            if tok is None:
                if not stack:
                    return None
                # Unclosed parens are reported innermost first
                open_tok, items = stack.pop()
                self.src.report(CalcSyntaxError("expected ')'", open_tok.pos))
                node: Node = Expression(open_tok.pos, tuple(items))
            elif tok.type == "lparen":
                stack.append((tok, []))
                continue
            elif tok.type == "rparen":
                if not stack:
                    self.src.report(CalcSyntaxError("unexpected ')'", tok.pos))
                    return None
                open_tok, items = stack.pop()
                node = Expression(open_tok.pos, tuple(items))
            else:
                node = self._parse_atom(tok)

            if not stack:
                return node
            stack[-1][1].append(node)

    def parse_all(self) -> Iterator[Node]:
        while self.peek() is not None:
            node = self.parse_expr()
            if node is not None:
                yield node


def parse_file(src: SourceFile) -> File:
    """Parse the whole of `src.text` into a File node."""
    stream = TokenStream(src, lex(src))
    return File(0, tuple(stream.parse_all()))
