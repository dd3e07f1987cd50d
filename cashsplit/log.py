from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Send the package's log records to stderr at the requested level."""
    name = (level or os.getenv("CASHSPLIT_LOG_LEVEL") or "WARNING").upper()
    lvl = logging.getLevelName(name)
    if not isinstance(lvl, int):
        raise ValueError(f"Unknown log level: {name}")
    logger = logging.getLogger("cashsplit")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(lvl)
    return logger
