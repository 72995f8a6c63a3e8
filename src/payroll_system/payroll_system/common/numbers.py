from __future__ import annotations

import math
from typing import Any


def round2(value: float) -> float:
    """Round to 2 decimals, halves going up (stored precision of hours and pay)."""
    return math.floor(value * 100 + 0.5) / 100


def to_int(value: Any) -> int:
    """Lenient int parsing: anything unparseable becomes 0."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0
