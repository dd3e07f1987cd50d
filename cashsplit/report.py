from __future__ import annotations

import csv
import os
import time
from typing import List

from cashsplit.models import SplitPlan, SplitRequest
from cashsplit.rounding import truncate

TITLES = {
    "unconstrained": "Results with negative rebalancings",
    "constrained": "Results without negative rebalancings",
}


def _name_width(names: List[str]) -> int:
    return max([len("name")] + [len(n) for n in names])


def render_request(request: SplitRequest) -> str:
    w = _name_width([a.name for a in request.assets])
    out = [f"Initial allocated sums (total: {request.total:.2f})"]
    out.append(f"{'name':<{w}} {'value':>14} {'target':>8}")
    for a in request.assets:
        out.append(f"{a.name:<{w}} {a.value:>14.2f} {a.target:>8.3f}")
    out.append(f"Sum to add: {request.delta:.2f}")
    return "\n".join(out)


def render_plan(plan: SplitPlan) -> str:
    w = _name_width([ln.name for ln in plan.lines])
    out = [f"------ {TITLES[plan.mode]} ------"]
    out.append(f"Final sum: {plan.final_total:.2f}")
    out.append(
        f"{'name':<{w}} {'sum_to_add':>14} {'sum_final':>14} "
        f"{'target':>8} {'initial':>8} {'final':>8}"
    )
    for ln in plan.lines:
        out.append(
            f"{ln.name:<{w}} {truncate(ln.adjustment, 2):>14.2f} "
            f"{truncate(ln.final_value, 2):>14.2f} {ln.target:>8.3f} "
            f"{truncate(ln.initial_allocation, 3):>8.3f} "
            f"{truncate(ln.final_allocation, 3):>8.3f}"
        )
    s = plan.summary()
    out.append(f"Totals: buys={s['buys']:.2f} sells={s['sells']:.2f} net={s['net']:.2f}")
    return "\n".join(out)


def export_plan_csv(plan: SplitPlan, out_path: str = "cashsplit_plan.csv") -> str:
    exists = os.path.exists(out_path)
    with open(out_path, "a", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        if not exists:
            w.writerow(
                [
                    "ts",
                    "mode",
                    "name",
                    "adjustment",
                    "final_value",
                    "target",
                    "initial_allocation",
                    "final_allocation",
                ]
            )
        ts = int(time.time())
        for ln in plan.lines:
            w.writerow(
                [
                    ts,
                    plan.mode,
                    ln.name,
                    ln.adjustment,
                    ln.final_value,
                    ln.target,
                    ln.initial_allocation,
                    ln.final_allocation,
                ]
            )
    return out_path
