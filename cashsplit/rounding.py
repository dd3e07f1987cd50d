from __future__ import annotations

import math
from typing import Optional


def truncate(x: float, decimals: Optional[int] = None) -> float:
    """Drop digits past `decimals` places, rounding toward zero."""
    if decimals is None:
        return float(math.trunc(x))
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise ValueError(f"decimals must be an integer, got {decimals!r}")
    ten_pow = 10.0**decimals
    return math.trunc(x * ten_pow) / ten_pow
