"""Evaluate small matrix expressions such as ``"M'*M"`` or ``"(M+M)^-1"``.

Each ``M`` (or ``F``) in the expression stands for the next matrix argument.
Operators, from lowest to highest precedence:

* ``A+B`` and ``A-B``: element-wise addition and subtraction
* ``A*B`` and ``AB``: matrix product
* ``-A``: negation
* ``A^-1``: inverse (no other exponent is accepted)
* ``A'``: transpose

Parentheses group sub-expressions, numeric literals become scalars, and
spaces are ignored.
"""

from __future__ import annotations

import re

from .decomp import inverse
from .matrix import Matrix

__all__ = ["ExpressionError", "evaluate"]

_NUMBER = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_NUMBER_START = frozenset("0123456789.")
_PLACEHOLDERS = frozenset("MF")


class ExpressionError(ValueError):
    """Raised when a matrix expression is malformed."""


class _Evaluator:
    def __init__(self, expr: str, args: tuple[Matrix, ...]) -> None:
        self.expr = expr
        self.args = iter(args)
        self.pos = 0

    def _error(self, message: str) -> ExpressionError:
        return ExpressionError(f"{message} at position {self.pos} in {self.expr!r}")

    @staticmethod
    def _times(acc: Matrix | None, rhs: Matrix | None) -> Matrix:
        if rhs is None:
            raise ExpressionError("missing operand")
        if acc is None:
            return rhs
        return acc @ rhs

    def _require(self, operand: Matrix | None) -> Matrix:
        if operand is None:
            raise self._error("missing operand")
        return operand

    def gobble_right(self, acc: Matrix | None) -> Matrix | None:
        """Apply any trailing transpose and inverse operators to ``acc``."""
        expr = self.expr
        while self.pos < len(expr):
            c = expr[self.pos]
            if c == "'":
                acc = self._require(acc).transpose()
                self.pos += 1
            elif c == "^":
                operand = self._require(acc)
                if expr[self.pos + 1 : self.pos + 3] != "-1":
                    raise self._error("only the exponent ^-1 is supported")
                acc = inverse(operand)
                self.pos += 3
            else:
                return acc
        return acc

    def _operand(self, oneterm: bool) -> Matrix | None:
        rhs = self.recurse(None, oneterm)
        return self.gobble_right(rhs)

    def recurse(self, acc: Matrix | None, oneterm: bool) -> Matrix | None:
        """Evaluate from the current position; stop after one term if asked."""
        expr = self.expr
        while self.pos < len(expr):
            c = expr[self.pos]

            if c == "(":
                if oneterm and acc is not None:
                    return acc
                self.pos += 1
                acc = self._times(acc, self._operand(False))

            elif c == ")":
                if oneterm:
                    return acc
                self.pos += 1
                return acc

            elif c == "*":
                self.pos += 1
                acc = self._times(acc, self._operand(True))

            elif c in _PLACEHOLDERS:
                try:
                    rhs: Matrix | None = next(self.args)
                except StopIteration:
                    raise self._error("not enough matrix arguments") from None
                self.pos += 1
                acc = self._times(acc, self.gobble_right(rhs))

            elif c in _NUMBER_START:
                match = _NUMBER.match(expr, self.pos)
                if match is None:
                    raise self._error("malformed number")
                self.pos = match.end()
                rhs = Matrix.scalar(float(match.group()))
                acc = self._times(acc, self.gobble_right(rhs))

            elif c == "+":
                if oneterm and acc is not None:
                    return acc
                if acc is None:
                    raise self._error("unary plus is not supported")
                self.pos += 1
                rhs = self._operand(True)
                acc = acc + self._require(rhs)

            elif c == "-":
                if oneterm and acc is not None:
                    return acc
                self.pos += 1
                rhs = self._require(self._operand(True))
                acc = rhs.scale(-1.0) if acc is None else acc - rhs

            elif c == " ":
                self.pos += 1

            else:
                raise self._error(f"unknown character {c!r}")
        return acc


def evaluate(expr: str, *args: Matrix) -> Matrix:
    """Evaluate ``expr`` with one matrix argument per ``M`` or ``F``.

    Always returns a new matrix; the arguments are left untouched.
    """
    nargs = sum(1 for c in expr if c in _PLACEHOLDERS)
    if nargs == 0:
        raise ExpressionError(f"expression {expr!r} has no matrix placeholders")
    if len(args) != nargs:
        raise ExpressionError(
            f"expression {expr!r} needs {nargs} matrices, got {len(args)}"
        )
    for arg in args:
        if not isinstance(arg, Matrix):
            raise TypeError(f"expected a Matrix argument, got {type(arg).__name__}")

    result = _Evaluator(expr, args).recurse(None, False)
    if result is None:
        raise ExpressionError(f"expression {expr!r} produced no value")
    return result.copy()