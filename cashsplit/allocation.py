from __future__ import annotations

from typing import List, Sequence, Tuple

from cashsplit.errors import DegenerateAllocationError
from cashsplit.summation import precise_sum


def allocation_of(values: Sequence[float]) -> Tuple[float, List[float]]:
    """Return the precise total of `values` and each value's fraction of it."""
    total = precise_sum(values)
    if total == 0:
        raise DegenerateAllocationError(
            f"Cannot compute an allocation of {len(values)} values summing to 0"
        )
    return total, [v / total for v in values]


def scale_to(values: Sequence[float], amount: float) -> List[float]:
    """Split `amount` across `values` proportionally to them.

    Same as multiplying the allocation of `values` by `amount`, but
    ``scale_to(v, precise_sum(v))`` gives back ``v`` exactly.
    """
    total = precise_sum(values)
    if total == 0:
        raise DegenerateAllocationError(
            f"Cannot split {amount} across {len(values)} values summing to 0"
        )
    factor = amount / total
    return [v * factor for v in values]
