"""Expression evaluation by two-stack operator precedence.

Data flow per call:
1. Reject empty / whitespace-only input
2. tokenize() the string
3. Walk the tokens with an operand stack (floats) and an operator stack
   (operators and ``(``), reducing eagerly whenever the operator on top
   binds at least as tightly as the incoming one
4. Drain the operator stack; exactly one operand must remain

No parse tree is built and nothing outlives the call, so concurrent
callers need no coordination.
"""

from __future__ import annotations

import logging
from typing import Iterable

from acousticalc.errors import (
    DivisionByZeroError,
    EmptyExpressionError,
    InvalidExpressionError,
    InvalidNumberError,
    MismatchedParenthesesError,
    UnknownTokenError,
)
from acousticalc.models import OPERATORS, Token, TokenKind
from acousticalc.tokenizer import tokenize

logger = logging.getLogger(__name__)

# Binding strength; higher binds tighter. All four are left-associative.
_PRECEDENCE: dict[str, int] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}


def has_precedence(op1: str, op2: str) -> bool:
    """Return True if stacked ``op1`` must be applied before incoming ``op2``.

    That is the case when op1 binds at least as tightly as op2 (ties reduce
    left to right). Parentheses are structural and never compare.
    """
    if op1 not in _PRECEDENCE or op2 not in _PRECEDENCE:
        return False
    return _PRECEDENCE[op1] >= _PRECEDENCE[op2]


def apply_operator(a: float, b: float, op: str) -> float:
    """Compute ``a op b``.

    Raises:
        DivisionByZeroError: for ``/`` with a divisor of exactly zero.
        UnknownTokenError: if ``op`` is not one of ``+ - * /``.
    """
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise DivisionByZeroError()
        return a / b
    raise UnknownTokenError(op, f"unknown operator: {op}")


def _reduce(values: list[float], operators: list[str]) -> None:
    """Pop one operator and its two operands, push the result."""
    if len(values) < 2:
        raise InvalidExpressionError()
    op = operators.pop()
    b = values.pop()
    a = values.pop()
    values.append(apply_operator(a, b, op))


def _parse_number(token: Token) -> float:
    try:
        return float(token.text)
    except ValueError:
        raise InvalidNumberError(token.text) from None


def evaluate_tokens(tokens: Iterable[Token]) -> float:
    """Evaluate a token sequence produced by tokenize().

    Raises:
        InvalidNumberError: a numeric literal does not parse.
        InvalidExpressionError: an operator lacks operands, or anything
            other than exactly one value is left at the end.
        MismatchedParenthesesError: unclosed ``(`` or stray ``)``.
        DivisionByZeroError: right-hand side of ``/`` is zero.
        UnknownTokenError: a token of no known kind.
    """
    values: list[float] = []
    operators: list[str] = []

    for token in tokens:
        kind = getattr(token, "kind", None)

        if kind == TokenKind.NUMBER:
            values.append(_parse_number(token))

        elif kind == TokenKind.LPAREN:
            operators.append("(")

        elif kind == TokenKind.RPAREN:
            while operators and operators[-1] != "(":
                _reduce(values, operators)
            if not operators:
                raise MismatchedParenthesesError()
            operators.pop()

        elif kind == TokenKind.OPERATOR and token.text in OPERATORS:
            while (operators and operators[-1] != "("
                   and has_precedence(operators[-1], token.text)):
                _reduce(values, operators)
            operators.append(token.text)

        else:
            raise UnknownTokenError(str(token))

    while operators:
        if operators[-1] in ("(", ")"):
            raise MismatchedParenthesesError()
        _reduce(values, operators)

    if len(values) != 1:
        raise InvalidExpressionError()
    return values[0]


def evaluate(expression: str) -> float:
    """Evaluate an infix arithmetic expression.

    Supports numbers, ``+ - * /``, parentheses and unary minus. Every
    failure raises a subclass of CalculatorError.

    Args:
        expression: e.g. ``"-3 * (2 + -4) - -5"``.

    Returns:
        The result as a float.
    """
    if not expression.strip():
        raise EmptyExpressionError()

    tokens = tokenize(expression)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("tokens for %r: %s", expression, [t.text for t in tokens])
    if not tokens:
        raise InvalidExpressionError()

    result = evaluate_tokens(tokens)
    logger.debug("%r = %r", expression, result)
    return result


class Calculator:
    """Stateless calculator for callers that prefer an object.

    Holds no history or cache; every call is independent.
    """

    def evaluate(self, expression: str) -> float:
        return evaluate(expression)
