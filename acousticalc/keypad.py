"""Headless state of the interactive calculator.

Keys accumulate into an expression; ``=`` evaluates it. After a result,
an operator key continues from the displayed value while a digit starts
over, like a pocket calculator.
"""

from __future__ import annotations

from acousticalc.calculator import evaluate
from acousticalc.errors import CalculatorError
from acousticalc.formatting import format_display
from acousticalc.models import OPERATORS

CLEAR_KEYS = ("C", "c")
EQUALS_KEY = "="
SIGN_KEY = "±"
PERCENT_KEY = "%"
BACKSPACE_KEYS = ("⌫", "\b", "\x7f")

# Display glyphs → expression symbols
KEY_ALIASES = {
    "÷": "/",
    "×": "*",
}


class Keypad:
    """Expression buffer plus the last result or error."""

    def __init__(self) -> None:
        self.clear()

    def clear(self) -> None:
        """Reset to the power-on state."""
        self.display = "0"
        self.expression = ""
        self.result = 0.0
        self.has_result = False
        self.has_error = False
        self.error_message = ""

    def press(self, key: str) -> None:
        """Dispatch a single key."""
        key = KEY_ALIASES.get(key, key)
        if key in CLEAR_KEYS:
            self.clear()
        elif key == EQUALS_KEY:
            self.calculate()
        elif key == SIGN_KEY:
            self.toggle_sign()
        elif key == PERCENT_KEY:
            self.percentage()
        elif key in BACKSPACE_KEYS:
            self.backspace()
        else:
            self.append(key)

    def type(self, text: str) -> None:
        """Press every character of ``text`` in order."""
        for char in text:
            self.press(char)

    def append(self, value: str) -> None:
        if self.has_result and value in OPERATORS:
            # Continue with result if adding an operator
            self.expression = self.display + value
            self.has_result = False
        elif self.has_result:
            self.expression = value
            self.has_result = False
        else:
            self.expression += value

        self.display = self.expression
        self.has_error = False

    def calculate(self) -> None:
        """Evaluate the expression; the result becomes the new expression."""
        if not self.expression:
            return

        try:
            result = evaluate(self.expression)
        except CalculatorError as e:
            self.has_error = True
            self.error_message = str(e)
            self.display = "Error"
            return

        self._show_result(result)
        self.has_error = False

    def toggle_sign(self) -> None:
        if self.has_result:
            self._show_result(-self.result)
        elif self.expression:
            if self.expression.startswith("-"):
                self.expression = self.expression[1:]
            else:
                self.expression = "-" + self.expression
            self.display = self.expression

    def percentage(self) -> None:
        """Divide the current value by 100.

        An expression that does not evaluate is left untouched.
        """
        if self.has_result:
            self._show_result(self.result / 100)
        elif self.expression:
            try:
                result = evaluate(self.expression)
            except CalculatorError:
                return
            self._show_result(result / 100)

    def backspace(self) -> None:
        if self.has_result:
            self.clear()
            return

        if self.expression:
            self.expression = self.expression[:-1]
            self.display = self.expression or "0"
            self.has_error = False

    def _show_result(self, value: float) -> None:
        self.result = value
        self.has_result = True
        self.display = format_display(value)
        self.expression = self.display
