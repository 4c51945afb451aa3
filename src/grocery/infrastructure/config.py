"""Settings read from the environment (and a local ``.env`` file)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_LEVEL = "WARNING"


def _log_level(name: str | None) -> str:
    """Return a level name ``logging`` accepts, else the default."""
    name = (name or "").strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


DATA_DIR = Path(os.getenv("GROCERY_DATA_DIR", "data"))
STORAGE_KEY = os.getenv("GROCERY_STORAGE_KEY", "groceryInventory")

LOG_LEVEL = _log_level(os.getenv("GROCERY_LOG_LEVEL"))
LOG_FILE = os.getenv("GROCERY_LOG_FILE") or None
