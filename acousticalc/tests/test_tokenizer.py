"""Tests for tokenize(): number accumulation, operators, and unary minus folding."""

import pytest

from acousticalc.errors import InvalidCharacterError
from acousticalc.models import Token, TokenKind
from acousticalc.tokenizer import tokenize


def texts(expr):
    return [t.text for t in tokenize(expr)]


def test_simple_expression():
    assert texts("2 + 3") == ["2", "+", "3"]


def test_whitespace_is_never_emitted():
    assert texts("  12   *  4 ") == ["12", "*", "4"]


def test_no_whitespace_needed():
    assert texts("(1+2)*3/4") == ["(", "1", "+", "2", ")", "*", "3", "/", "4"]


def test_decimal_literal_accumulates():
    assert texts("3.14 + .5") == ["3.14", "+", ".5"]


def test_malformed_number_is_still_one_token():
    """Parsing to float happens later, in the evaluator."""
    assert texts("3.14.15") == ["3.14.15"]


def test_token_kinds():
    tokens = tokenize("(1 - 2)")
    assert [t.kind for t in tokens] == [
        TokenKind.LPAREN,
        TokenKind.NUMBER,
        TokenKind.OPERATOR,
        TokenKind.NUMBER,
        TokenKind.RPAREN,
    ]


def test_positions():
    tokens = tokenize("12 + -3")
    assert [t.position for t in tokens] == [0, 3, 5]


def test_tokens_are_immutable():
    token = tokenize("7")[0]
    with pytest.raises(AttributeError):
        token.text = "8"


# --- Unary minus ---

def test_leading_minus_folds_into_number():
    assert texts("-5 + 3") == ["-5", "+", "3"]


def test_minus_after_operator_folds():
    assert texts("10 - -5") == ["10", "-", "-5"]


def test_minus_after_open_paren_folds():
    assert texts("(-4)") == ["(", "-4", ")"]


def test_minus_after_number_is_binary():
    assert texts("5-3") == ["5", "-", "3"]


def test_minus_after_close_paren_is_binary():
    assert texts("(5) - 3") == ["(", "5", ")", "-", "3"]


def test_mixed_unary_and_binary():
    assert texts("-3 * (2 + -4) - -5") == [
        "-3", "*", "(", "2", "+", "-4", ")", "-", "-5",
    ]


def test_lone_sign_is_flushed_as_operator():
    tokens = tokenize("- 5")
    assert tokens[0] == Token.operator("-", 0)
    assert tokens[1] == Token.number("5", 2)


def test_double_minus():
    assert texts("--5") == ["-", "-5"]


def test_plus_is_never_a_sign():
    assert texts("+5") == ["+", "5"]


# --- Errors ---

@pytest.mark.parametrize("expr,char,pos", [
    ("2 + a", "a", 4),
    ("2 ^ 3", "^", 2),
    ("1e5", "e", 1),
    ("5 % 2", "%", 2),
    ("x", "x", 0),
])
def test_invalid_character(expr, char, pos):
    with pytest.raises(InvalidCharacterError) as exc_info:
        tokenize(expr)
    assert exc_info.value.char == char
    assert exc_info.value.position == pos
    assert str(exc_info.value) == f"invalid character: {char}"


def test_non_ascii_digit_rejected():
    with pytest.raises(InvalidCharacterError):
        tokenize("٣ + 1")


def test_empty_string_gives_no_tokens():
    assert tokenize("") == []
