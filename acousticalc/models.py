"""Data models for acousticalc.

TokenKind, Token and Calculation: the typed structures that flow through
tokenizer → calculator → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

OPERATORS = ("+", "-", "*", "/")


class TokenKind(str, Enum):
    """Lexical categories produced by the tokenizer."""

    NUMBER = "number"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"


@dataclass(frozen=True)
class Token:
    """A single lexical unit.

    ``text`` is the source spelling: a numeric literal (possibly with a
    folded leading ``-``), one operator symbol, or one parenthesis.
    ``position`` is the index of its first character in the expression.
    """

    kind: TokenKind
    text: str
    position: int = 0

    @classmethod
    def number(cls, text: str, position: int = 0) -> Token:
        return cls(TokenKind.NUMBER, text, position)

    @classmethod
    def operator(cls, text: str, position: int = 0) -> Token:
        return cls(TokenKind.OPERATOR, text, position)

    @classmethod
    def paren(cls, text: str, position: int = 0) -> Token:
        kind = TokenKind.LPAREN if text == "(" else TokenKind.RPAREN
        return cls(kind, text, position)

    def __str__(self) -> str:
        return self.text


@dataclass
class Calculation:
    """An expression together with its evaluated result."""

    expression: str
    result: float

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "expression": self.expression,
            "result": self.result,
        }

    @classmethod
    def from_dict(cls, d: dict) -> Calculation:
        return cls(
            expression=d.get("expression", ""),
            result=float(d.get("result", 0.0)),
        )
