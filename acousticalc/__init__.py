"""acousticalc: terminal arithmetic calculator.

Parses and evaluates infix expressions (numbers, ``+ - * /``, parentheses,
unary minus) without eval(). Use it as a library or from the shell.

Usage:
    python -m acousticalc eval "2 + 3 * 4"   # Result: 14
    python -m acousticalc repl               # Interactive session

    >>> from acousticalc import evaluate
    >>> evaluate("(2 + 3) * 4")
    20.0
"""

__version__ = "0.1.0"

from acousticalc.calculator import Calculator, evaluate, evaluate_tokens
from acousticalc.errors import (
    CalculatorError,
    DivisionByZeroError,
    EmptyExpressionError,
    ErrorKind,
    InvalidCharacterError,
    InvalidExpressionError,
    InvalidNumberError,
    MismatchedParenthesesError,
    UnknownTokenError,
)
from acousticalc.tokenizer import tokenize

__all__ = [
    "Calculator",
    "CalculatorError",
    "DivisionByZeroError",
    "EmptyExpressionError",
    "ErrorKind",
    "InvalidCharacterError",
    "InvalidExpressionError",
    "InvalidNumberError",
    "MismatchedParenthesesError",
    "UnknownTokenError",
    "evaluate",
    "evaluate_tokens",
    "tokenize",
]
