"""Tests for the interactive keypad state."""

import pytest

from acousticalc.keypad import Keypad


@pytest.fixture
def keypad():
    return Keypad()


def test_initial_state(keypad):
    assert keypad.display == "0"
    assert keypad.expression == ""
    assert not keypad.has_result
    assert not keypad.has_error


def test_keys_accumulate(keypad):
    keypad.type("12+3")
    assert keypad.expression == "12+3"
    assert keypad.display == "12+3"


def test_calculate(keypad):
    keypad.type("2+3*4=")
    assert keypad.has_result
    assert keypad.result == pytest.approx(14.0)
    assert keypad.display == "14"
    assert keypad.expression == "14"


def test_display_hides_float_noise(keypad):
    keypad.type("0.1+0.2=")
    assert keypad.display == "0.3"


def test_calculate_empty_is_noop(keypad):
    keypad.calculate()
    assert keypad.display == "0"
    assert not keypad.has_result


def test_operator_continues_from_result(keypad):
    keypad.type("2+3=")
    keypad.type("*2=")
    assert keypad.display == "10"


def test_digit_after_result_starts_over(keypad):
    keypad.type("2+3=")
    keypad.press("7")
    assert keypad.expression == "7"
    assert not keypad.has_result


def test_negative_result_continues(keypad):
    keypad.type("2-5=")
    keypad.type("+1=")
    assert keypad.display == "-2"


def test_display_glyphs(keypad):
    keypad.type("8÷2×3=")
    assert keypad.display == "12"


def test_error(keypad):
    keypad.type("1/0=")
    assert keypad.has_error
    assert keypad.display == "Error"
    assert keypad.error_message == "division by zero"


def test_append_clears_error_flag(keypad):
    keypad.type("2+=")
    assert keypad.has_error
    keypad.press("3")
    assert not keypad.has_error
    assert keypad.expression == "2+3"


def test_clear(keypad):
    keypad.type("2+3=")
    keypad.press("C")
    assert keypad.display == "0"
    assert keypad.expression == ""
    assert keypad.result == 0.0
    assert not keypad.has_result


def test_toggle_sign_expression(keypad):
    keypad.type("5")
    keypad.press("±")
    assert keypad.expression == "-5"
    keypad.press("±")
    assert keypad.expression == "5"


def test_toggle_sign_result(keypad):
    keypad.type("4*2=")
    keypad.toggle_sign()
    assert keypad.result == pytest.approx(-8.0)
    assert keypad.display == "-8"


def test_toggle_sign_empty_is_noop(keypad):
    keypad.toggle_sign()
    assert keypad.expression == ""
    assert keypad.display == "0"


def test_percentage_of_expression(keypad):
    keypad.type("50")
    keypad.press("%")
    assert keypad.has_result
    assert keypad.display == "0.5"


def test_percentage_of_result(keypad):
    keypad.type("10*5=")
    keypad.percentage()
    assert keypad.result == pytest.approx(0.5)


def test_percentage_ignores_bad_expression(keypad):
    keypad.type("5+")
    keypad.percentage()
    assert keypad.expression == "5+"
    assert not keypad.has_result
    assert not keypad.has_error


def test_backspace(keypad):
    keypad.type("12")
    keypad.backspace()
    assert keypad.expression == "1"
    keypad.backspace()
    assert keypad.expression == ""
    assert keypad.display == "0"


def test_backspace_after_result_clears(keypad):
    keypad.type("1+1=")
    keypad.press("⌫")
    assert keypad.display == "0"
    assert not keypad.has_result
