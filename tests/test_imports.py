# tests/test_imports.py
# Purpose: ensure key modules import without side-effects or missing deps.


def test_imports_smoke():
    modules = [
        "cashsplit.errors",
        "cashsplit.summation",
        "cashsplit.rounding",
        "cashsplit.allocation",
        "cashsplit.rebalancer",
        "cashsplit.models",
        "cashsplit.config",
        "cashsplit.report",
        "cashsplit.log",
        "cashsplit.__main__",
    ]
    for m in modules:
        __import__(m)
