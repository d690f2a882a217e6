"""Error taxonomy for expression evaluation.

Every failure is terminal: evaluation either returns a single float or
raises one of these. All of them are ValueErrors so callers that only care
about "bad input" can catch that; division by zero is also a
ZeroDivisionError.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories surfaced to callers."""

    EMPTY_EXPRESSION = "empty_expression"
    INVALID_CHARACTER = "invalid_character"
    INVALID_NUMBER = "invalid_number"
    INVALID_EXPRESSION = "invalid_expression"
    MISMATCHED_PARENTHESES = "mismatched_parentheses"
    DIVISION_BY_ZERO = "division_by_zero"
    UNKNOWN_TOKEN = "unknown_token"


class CalculatorError(ValueError):
    """Base class for every evaluation failure."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyExpressionError(CalculatorError):
    kind = ErrorKind.EMPTY_EXPRESSION

    def __init__(self) -> None:
        super().__init__("empty expression")


class InvalidCharacterError(CalculatorError):
    """A character outside digits, ``. + - * / ( )`` and whitespace."""

    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"invalid character: {char}")
        self.char = char
        self.position = position


class InvalidNumberError(CalculatorError):
    """A numeric literal that does not parse, e.g. ``3.14.15``."""

    kind = ErrorKind.INVALID_NUMBER

    def __init__(self, literal: str) -> None:
        super().__init__(f"invalid number: {literal}")
        self.literal = literal


class InvalidExpressionError(CalculatorError):
    kind = ErrorKind.INVALID_EXPRESSION

    def __init__(self) -> None:
        super().__init__("invalid expression")


class MismatchedParenthesesError(CalculatorError):
    kind = ErrorKind.MISMATCHED_PARENTHESES

    def __init__(self) -> None:
        super().__init__("mismatched parentheses")


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self) -> None:
        super().__init__("division by zero")


class UnknownTokenError(CalculatorError):
    """A token that is neither number, operator nor parenthesis.

    Unreachable through tokenize(); only hand-built token lists hit it.
    """

    kind = ErrorKind.UNKNOWN_TOKEN

    def __init__(self, token: str, message: str | None = None) -> None:
        super().__init__(message or f"invalid token: {token}")
        self.token = token
