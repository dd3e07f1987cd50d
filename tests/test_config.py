from pathlib import Path

import pytest
from pydantic import ValidationError

from cashsplit.config import load_config, load_split_request

EXAMPLE = Path(__file__).resolve().parents[1] / "config" / "example.yaml"


def _write(tmp_path, text):
    fp = tmp_path / "split.yaml"
    fp.write_text(text, encoding="utf-8")
    return fp


def test_example_config_loads(monkeypatch):
    monkeypatch.delenv("CASHSPLIT_DELTA", raising=False)
    req = load_split_request(EXAMPLE)
    assert req.delta == 10000.0
    assert [a.name for a in req.assets] == ["Equity ETFs", "Pension funds", "Bonds"]
    assert req.values == [6000.0, 5000.0, 6000.0]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_empty_file_is_empty_dict(tmp_path):
    assert load_config(_write(tmp_path, "")) == {}


def test_delta_precedence(tmp_path, monkeypatch):
    fp = _write(
        tmp_path,
        "delta: 100\nassets:\n"
        "  - {name: A, value: 10, target: 0.5}\n"
        "  - {name: B, value: 30, target: 0.5}\n",
    )
    monkeypatch.delenv("CASHSPLIT_DELTA", raising=False)
    assert load_split_request(fp).delta == 100.0
    monkeypatch.setenv("CASHSPLIT_DELTA", "-20")
    assert load_split_request(fp).delta == -20.0
    assert load_split_request(fp, delta=5.0).delta == 5.0


def test_missing_delta_raises(tmp_path, monkeypatch):
    monkeypatch.delenv("CASHSPLIT_DELTA", raising=False)
    fp = _write(
        tmp_path,
        "assets:\n"
        "  - {name: A, value: 10, target: 0.5}\n"
        "  - {name: B, value: 30, target: 0.5}\n",
    )
    with pytest.raises(ValueError, match="No delta"):
        load_split_request(fp)


def test_invalid_asset_raises(tmp_path, monkeypatch):
    monkeypatch.delenv("CASHSPLIT_DELTA", raising=False)
    fp = _write(
        tmp_path,
        "delta: 1\nassets:\n"
        "  - {name: A, value: 10}\n"
        "  - {name: B, value: 30, target: 0.5}\n",
    )
    with pytest.raises(ValidationError):
        load_split_request(fp)
