"""Lenient number parsing for form fields.

Typed user input is read the way a browser number field is usually read:
take the longest numeric prefix and ignore the rest; anything unusable
becomes 0.
"""

from __future__ import annotations

import math
import re
from typing import Optional

_NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(text: Optional[str]) -> float:
    if text is None:
        return 0.0
    m = _NUMBER_PREFIX.match(str(text))
    if not m:
        return 0.0
    try:
        value = float(m.group(1))
    except ValueError:  # pragma: no cover
        return 0.0
    if math.isnan(value):
        return 0.0
    return value
