"""Numeric coercion helpers."""
from __future__ import annotations

import math
from typing import Any, Optional


def safe_number(value: Any, fallback: Optional[float]) -> Optional[float]:
    """Coerce value to a finite float, returning fallback when it is not one.

    Accepts numbers and numeric strings; booleans, None, NaN, infinities
    and integers too large for a float yield the fallback.
    """
    if value is None or isinstance(value, bool):
        return fallback
    try:
        num = float(value)
    except (TypeError, ValueError, OverflowError):
        return fallback
    return num if math.isfinite(num) else fallback


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return int(math.floor(value + 0.5))
