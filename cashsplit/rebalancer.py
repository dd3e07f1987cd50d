from __future__ import annotations

import logging
from typing import List, Sequence

from cashsplit.allocation import allocation_of, scale_to
from cashsplit.errors import DegenerateAllocationError, LengthMismatchError
from cashsplit.models import SplitLine, SplitPlan, SplitRequest
from cashsplit.summation import precise_sum

logger = logging.getLogger(__name__)

MODES = ("unconstrained", "constrained")


def _check_lengths(a: Sequence[float], b: Sequence[float], what: str) -> None:
    if len(a) != len(b):
        raise LengthMismatchError(
            f"{what} must have the same length, got {len(a)} and {len(b)}"
        )


def unconstrained_rebalance(
    total_before: float,
    current: Sequence[float],
    target: Sequence[float],
    delta: float,
) -> List[float]:
    """Split `delta` so the resulting allocation equals `target` exactly.

    Each entry fixes the existing total's allocation, ``(target - current) *
    total_before``, and then allocates the new money itself under the target,
    ``target * delta``. Entries can be negative (a sell) even on a deposit.
    """
    _check_lengths(current, target, "Current and target allocations")
    return [
        (t - c) * total_before + t * delta for c, t in zip(current, target)
    ]


def constrained_rebalance(
    magnitudes: Sequence[float], target: Sequence[float], delta: float
) -> List[float]:
    """Split `delta` without trading against its direction.

    A deposit never prescribes a sell and a withdrawal never prescribes a
    buy. The ideal per-asset diffs are clamped to the direction of `delta`
    and `delta` is then spread proportionally over what is left.
    """
    _check_lengths(magnitudes, target, "Current values and target allocations")
    if delta == 0:
        return [0.0] * len(magnitudes)

    final_total = precise_sum(magnitudes) + delta
    diffs = [t * final_total - m for m, t in zip(magnitudes, target)]

    if delta > 0:
        clamped = [d if d > 0 else 0.0 for d in diffs]
    else:
        clamped = [d if d < 0 else 0.0 for d in diffs]

    if not any(clamped):
        direction = "buy on a deposit" if delta > 0 else "sell on a withdrawal"
        raise DegenerateAllocationError(
            f"No asset can {direction} of {delta}; every asset is already past its target"
        )
    return scale_to(clamped, delta)


def plan_split(request: SplitRequest, mode: str = "constrained") -> SplitPlan:
    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode}")

    values = request.values
    targets = request.targets
    delta = request.delta

    initial_total = request.total
    if initial_total > 0:
        _, initial_alloc = allocation_of(values)
    else:
        initial_alloc = [0.0] * len(values)

    if mode == "unconstrained":
        adjustments = unconstrained_rebalance(
            initial_total, initial_alloc, targets, delta
        )
    else:
        adjustments = constrained_rebalance(values, targets, delta)

    final_values = [v + a for v, a in zip(values, adjustments)]
    final_total = precise_sum(final_values)
    if final_total > 0:
        _, final_alloc = allocation_of(final_values)
    else:
        final_alloc = [0.0] * len(final_values)

    logger.info(
        "Planned %s split of %s: total %.2f -> %.2f",
        mode,
        delta,
        initial_total,
        final_total,
    )
    lines: List[SplitLine] = []
    for i, asset in enumerate(request.assets):
        logger.debug("  %s: %+.2f -> %.2f", asset.name, adjustments[i], final_values[i])
        lines.append(
            SplitLine(
                name=asset.name,
                adjustment=adjustments[i],
                final_value=final_values[i],
                target=asset.target,
                initial_allocation=initial_alloc[i],
                final_allocation=final_alloc[i],
            )
        )

    return SplitPlan(
        mode=mode,
        delta=delta,
        initial_total=initial_total,
        final_total=final_total,
        lines=lines,
    )
