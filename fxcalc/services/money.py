"""Money / rounding helpers.

Centralized so the calculator, the formatters, and the HTML page use identical
rounding semantics: half away from zero, applied to the shortest decimal
representation of the float (so 12.345 rounds to 12.35 even though the binary
value sits slightly below it).
"""

from __future__ import annotations
import math
from decimal import Context, Decimal, ROUND_HALF_UP

# Wide enough for any finite float quantized to a handful of places.
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def round_to(value: float, places: int) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    return Decimal(repr(float(value))).quantize(exponent, context=_CONTEXT)


def round2(value: float) -> float:
    # Decimal refuses to quantize infinities; NaN and inf pass through as-is.
    if not math.isfinite(value):
        return value
    return float(round_to(value, 2))
