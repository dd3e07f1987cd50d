import csv

import pytest

from cashsplit.models import Asset, SplitRequest
from cashsplit.rebalancer import plan_split
from cashsplit.report import export_plan_csv, render_plan, render_request
from cashsplit.rounding import truncate


def _request():
    return SplitRequest(
        assets=[
            Asset(name="Equity ETFs", value=6000, target=0.3),
            Asset(name="Pension funds", value=5000, target=0.5),
            Asset(name="Bonds", value=6000, target=0.2),
        ],
        delta=10000,
    )


def test_truncate():
    assert truncate(1.23999, 2) == 1.23
    assert truncate(-1.23999, 2) == -1.23
    assert truncate(7.9) == 7.0
    with pytest.raises(ValueError):
        truncate(1.0, 1.5)


def test_render_request():
    text = render_request(_request())
    assert "Initial allocated sums (total: 17000.00)" in text
    assert "Pension funds" in text
    assert text.endswith("Sum to add: 10000.00")


def test_render_plans():
    unconstrained = render_plan(plan_split(_request(), mode="unconstrained"))
    assert "Results with negative rebalancings" in unconstrained
    bonds = [ln for ln in unconstrained.splitlines() if ln.startswith("Bonds")][0]
    assert float(bonds.split()[1]) < 0
    assert "Final sum: 27000.00" in unconstrained

    constrained = render_plan(plan_split(_request(), mode="constrained"))
    assert "Results without negative rebalancings" in constrained
    assert "sells=0.00" in constrained


def test_export_plan_csv_appends(tmp_path):
    out = tmp_path / "plan.csv"
    plan = plan_split(_request())
    assert export_plan_csv(plan, str(out)) == str(out)
    export_plan_csv(plan, str(out))
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 6
    assert rows[0]["mode"] == "constrained"
    assert rows[2]["name"] == "Bonds"
    assert float(rows[2]["adjustment"]) == 0.0
