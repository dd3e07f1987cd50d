from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from dotenv import load_dotenv

from cashsplit.config import load_split_request
from cashsplit.log import setup_logging
from cashsplit.rebalancer import MODES, plan_split
from cashsplit.report import export_plan_csv, render_plan, render_request


def plan_cmd(args: argparse.Namespace) -> int:
    request = load_split_request(args.config, delta=args.delta)

    modes = MODES if args.mode == "both" else (args.mode,)
    # every mode must succeed before anything is printed or written
    plans = [plan_split(request, mode=mode) for mode in modes]

    print(render_request(request))
    for plan in plans:
        print()
        print(render_plan(plan))
        if args.csv:
            out_file = export_plan_csv(plan, args.csv)
            print(f"[csv] wrote {plan.mode} plan to {out_file}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cashsplit",
        description="Split a deposit or withdrawal across assets toward a target allocation",
    )
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    sub = p.add_subparsers(dest="cmd")

    p_plan = sub.add_parser("plan", help="Compute how to split the delta")
    p_plan.add_argument("--config", "-c", required=True, help="Path to YAML config")
    p_plan.add_argument(
        "--delta",
        type=float,
        default=None,
        help="Amount to add (negative to withdraw); overrides the config",
    )
    p_plan.add_argument(
        "--mode",
        choices=("both",) + MODES,
        default="both",
        help="Which split to compute (default: both)",
    )
    p_plan.add_argument("--csv", default=None, help="Append the plan(s) to this CSV")
    p_plan.set_defaults(func=plan_cmd)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    p = build_parser()
    args = p.parse_args(argv)
    if not hasattr(args, "func"):
        p.print_help()
        return 2
    try:
        setup_logging(args.log_level)
        return int(args.func(args))
    except (ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
