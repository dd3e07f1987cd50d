from __future__ import annotations

from typing import Iterable


def precise_sum(values: Iterable[float]) -> float:
    """Kahan compensated sum. Empty input sums to 0.0.

    https://en.wikipedia.org/wiki/Kahan_summation_algorithm
    """
    it = iter(values)
    try:
        s = float(next(it))
    except StopIteration:
        return 0.0
    r = 0.0
    for v in it:
        t1 = v - r
        t2 = s + t1
        r = (t2 - s) - t1
        s = t2
    return s
