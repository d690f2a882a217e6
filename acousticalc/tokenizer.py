"""Split an arithmetic expression into tokens.

Scans left to right one character at a time. Digits and ``.`` accumulate
into a numeric buffer; operators and parentheses are single-character
tokens; whitespace only separates.

A ``-`` is folded into the next number (unary minus) when nothing has been
emitted yet or the last emitted token is an operator or ``(``. Otherwise it
is binary subtraction. A buffer that holds nothing but a folded ``-`` when
it gets flushed becomes a plain ``-`` operator, leaving the evaluator to
reject the expression.
"""

from __future__ import annotations

from acousticalc.errors import InvalidCharacterError
from acousticalc.models import OPERATORS, Token, TokenKind

_DIGITS = "0123456789"


def _starts_operand(tokens: list[Token]) -> bool:
    """True when a ``-`` at this point is a sign rather than subtraction."""
    if not tokens:
        return True
    return tokens[-1].kind in (TokenKind.OPERATOR, TokenKind.LPAREN)


def tokenize(expression: str) -> list[Token]:
    """Convert an expression string into a list of tokens.

    Raises:
        InvalidCharacterError: on any character outside digits,
            ``. + - * / ( )`` and whitespace.
    """
    tokens: list[Token] = []
    buffer = ""
    start = 0

    def flush() -> None:
        nonlocal buffer
        if not buffer:
            return
        if buffer == "-":
            tokens.append(Token.operator(buffer, start))
        else:
            tokens.append(Token.number(buffer, start))
        buffer = ""

    for pos, char in enumerate(expression):
        if char.isspace():
            flush()
        elif char in _DIGITS or char == ".":
            if not buffer:
                start = pos
            buffer += char
        elif char in OPERATORS or char in "()":
            flush()
            if char == "-" and _starts_operand(tokens):
                buffer = char
                start = pos
            elif char in "()":
                tokens.append(Token.paren(char, pos))
            else:
                tokens.append(Token.operator(char, pos))
        else:
            raise InvalidCharacterError(char, pos)

    flush()
    return tokens
