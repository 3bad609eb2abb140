"""Text formatting for spacing values shown to users."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

DISPLAY_DIGITS = 4


def format_spacing(value: float, digits: int = DISPLAY_DIGITS) -> str:
    """Render ``value`` with at most ``digits`` decimals and no trailing zeros.

    ``format_spacing(2.50000)`` gives ``"2.5"``; values that round to zero
    are shown as ``"0"`` regardless of sign. Exact ties round away from zero,
    so ``1.03125`` becomes ``"1.0313"``.
    """

    # Decimal(float) is exact, so ties are decided on the stored binary value.
    quantum = Decimal(1).scaleb(-digits)
    text = f"{Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP):f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def round_spacing(value: float) -> str:
    """Whole-unit spacing for the live preview; halves round toward +inf."""

    floor = math.floor(value)
    return str(int(floor + 1 if value - floor >= 0.5 else floor))


__all__ = ["DISPLAY_DIGITS", "format_spacing", "round_spacing"]
