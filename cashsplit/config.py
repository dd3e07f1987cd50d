from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from cashsplit.models import Asset, SplitRequest

logger = logging.getLogger(__name__)


def load_config(path: str | Path) -> dict:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {p}")
    with open(p, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_split_request(
    path: str | Path, delta: Optional[float] = None
) -> SplitRequest:
    """Build a validated SplitRequest from a YAML config.

    Delta precedence: the `delta` argument, then $CASHSPLIT_DELTA, then the
    file's `delta` key.
    """
    cfg = load_config(path)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a mapping: {path}")
    assets_cfg = cfg.get("assets") or []
    if not isinstance(assets_cfg, list):
        raise ValueError("Config key 'assets' must be a list.")
    assets = [Asset.model_validate(a) for a in assets_cfg]

    if delta is None:
        env_delta = os.getenv("CASHSPLIT_DELTA", "").strip()
        if env_delta:
            delta = float(env_delta)
            logger.debug("Delta %s taken from CASHSPLIT_DELTA", delta)
        elif cfg.get("delta") is not None:
            delta = float(cfg["delta"])
        else:
            raise ValueError(f"No delta given and none set in {path}")

    return SplitRequest(assets=assets, delta=delta)
