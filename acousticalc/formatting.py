"""Render evaluation results for the CLI and the interactive display."""

from __future__ import annotations

import math
from decimal import Decimal

# Decimal exponents outside [_MIN_PLAIN_EXPONENT, _MAX_PLAIN_EXPONENT) print
# in d.ddde±XX form.
_MIN_PLAIN_EXPONENT = -4
_MAX_PLAIN_EXPONENT = 6


def _shortest_digits(magnitude: float) -> tuple[str, int]:
    """Shortest round-trip digits of a positive float and its decimal exponent.

    ``1234567.0`` → ``("1234567", 6)``, ``1e-05`` → ``("1", -5)``.
    """
    _, digits, exponent = Decimal(repr(magnitude)).normalize().as_tuple()
    return "".join(str(d) for d in digits), len(digits) + exponent - 1


def format_result(value: float) -> str:
    """Format a result for ``Result: <value>`` output.

    Uses the shortest digits that round-trip. Values whose decimal exponent
    is below -4 or at least 6 switch to exponent form (``1e+06``,
    ``1.234567e+06``, ``1e-05``); the rest print plainly without a
    trailing ``.0`` (``14``, ``13.5``, ``0.30000000000000004``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    digits, exp10 = _shortest_digits(magnitude)

    if exp10 < _MIN_PLAIN_EXPONENT or exp10 >= _MAX_PLAIN_EXPONENT:
        mantissa = digits[0]
        if len(digits) > 1:
            mantissa += "." + digits[1:]
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exp10):02d}"

    # repr stays in fixed notation for exponents in [-4, 16)
    text = repr(magnitude)
    if text.endswith(".0"):
        text = text[:-2]
    return sign + text


def format_display(value: float) -> str:
    """Format a result for the calculator display.

    Ten fixed decimals, then trailing zeros and a dangling ``.`` removed,
    so ``0.1 + 0.2`` shows as ``0.3``.
    """
    text = f"{value:.10f}"
    return text.rstrip("0").rstrip(".")
