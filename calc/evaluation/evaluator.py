"""Core evaluator for the calculator language.

Walks a parsed File node recursively. Diagnostics go to the SourceFile the
tree was parsed from; faults (CalcFault) propagate to the caller.
"""

from __future__ import annotations

import logging

from calc import CalcValue
from calc.config import EvalOptions
from calc.errors import CalcDivisionByZero, CalcError, CalcFault, CalcInternalFault, CalcNameError
from calc.reader.ast import Expression, File, Identifier, Node, Number, Operator
from calc.reader.source import SourceFile
from calc.types.environment import Environment
from calc.types.nothing import Nothing
from calc.types.values import Builtin, Symbol, Thunk, UnresolvedIdentifier, is_callable


logger = logging.getLogger("Evaluator")


def force(value: CalcValue) -> CalcValue:
    """Replace a define'd thunk by the value it stands for."""
    if isinstance(value, Thunk):
        return value.value
    return value


class Evaluator:
    """Evaluates syntax trees from one SourceFile against one Environment."""

    def __init__(self, env: Environment, src: SourceFile, options: EvalOptions | None = None):
        # Builtins read env.strict; a different options.strict would mix policies
        if options is None:
            options = EvalOptions(strict=env.strict)
        elif options.strict != env.strict:
            raise ValueError(
                f"options.strict={options.strict} does not match env.strict={env.strict}"
            )
        self.env = env
        self.src = src
        self.options = options

    def _report(self, pos: int, message: str) -> None:
        logger.debug("diagnostic at %s: %s", self.src.location(pos), message)
        self.src.add_error(pos, message)

    def eval(self, node: Node) -> CalcValue:
        match node:
            case File():
                return self._eval_file(node)
            case Identifier():
                return self._eval_identifier(node)
            case Number():
                return node.val
            case Operator():
                # The lexer only produces operator tokens that are builtins
                builtin = self.env.builtins.get(node.val)
                if builtin is None:
                    raise CalcInternalFault(f"no builtin for operator {node.val!r}", node.pos)
                return builtin
            case Expression():
                return self._eval_expression(node)
        raise CalcInternalFault(f"cannot evaluate {type(node).__name__} node", node.pos)

    def _eval_file(self, node: File) -> CalcValue:
        """Evaluate top-level nodes in order; the last value is the result.

        The first unknown identifier reaching this level, or a form nested
        deeper than the interpreter stack allows, stops evaluation.
        """
        result: CalcValue = Nothing
        for child in node.nodes:
            try:
                result = force(self.eval(child))
            except CalcNameError as err:
                self._report(err.pos, err.message)
                return Nothing
            except RecursionError:
                # Parsing has no depth limit but evaluation recurses per level
                self._report(child.pos, "expression nested too deeply")
                return Nothing
            if isinstance(result, UnresolvedIdentifier):
                self._report(result.pos, f"unknown identifier: {result.name}")
                return Nothing
        return result

    def _eval_identifier(self, node: Identifier) -> CalcValue:
        value = self.env.resolve(node.lit)
        if value is not None:
            return value
        if self.env.strict:
            raise CalcNameError(node.lit, node.pos)
        return UnresolvedIdentifier(node.lit, node.pos)

    def _eval_argument(self, fn: CalcValue, index: int, node: Node) -> CalcValue:
        if index == 0 and isinstance(fn, Builtin) and fn.binding and isinstance(node, Identifier):
            return Symbol(node.lit, node.pos)
        return force(self.eval(node))

    def _eval_expression(self, node: Expression) -> CalcValue:
        if not node.nodes:
            self._report(node.pos, "empty expression not allowed")
            return Nothing

        head, *rest = node.nodes
        fn = self.eval(head)
        if not is_callable(fn):
            self._report(head.pos, "first element of an expression must be a function")
            return Nothing

        # Arguments are evaluated eagerly, left to right, even for `if`
        args = [self._eval_argument(fn, i, child) for i, child in enumerate(rest)]

        try:
            return fn(self.env, args)
        except CalcDivisionByZero as err:
            if self.options.debug:
                logger.error("division by zero at %s", self.src.location(node.pos))
                raise
            self._report(node.pos, err.message)
            return Nothing
        except CalcFault:
            raise
        except CalcError as err:
            self._report(node.pos, err.message)
            return Nothing
