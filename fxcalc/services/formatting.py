"""Display formatting for amounts and rates.

Renders with zh-TW conventions (comma thousands separator, dot decimal point)
and a fixed number of fraction digits. No business logic lives here.
"""

from __future__ import annotations

import math
from decimal import Decimal

from .money import round_to


def _format_non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "∞" if value > 0 else "-∞"


def format_number(value: float, decimals: int) -> str:
    if not math.isfinite(value):
        return _format_non_finite(value)
    rounded = round_to(value, decimals)
    if rounded.is_zero():
        rounded = abs(rounded)
    return f"{rounded:,.{decimals}f}"


def format_currency(value: float, decimals: int = 2) -> str:
    return format_number(value, decimals)


def format_rate(value: float, decimals: int = 4) -> str:
    return format_number(value, decimals)


def clipboard_text(value: float) -> str:
    """Plain decimal text for pasting elsewhere: no grouping, no trailing zeros."""
    if not math.isfinite(value):
        return _format_non_finite(value)
    if value == 0:
        return "0"
    return format(Decimal(repr(float(value))).normalize(), "f")
