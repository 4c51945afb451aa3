"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from grocery.application.inventory_store import InventoryStore
from grocery.infrastructure import config
from grocery.infrastructure.persistence.json_inventory_storage import (
    JsonInventoryStorage,
)


def inventory_storage(data_dir: Path | None = None) -> JsonInventoryStorage:
    return JsonInventoryStorage(
        data_dir if data_dir is not None else config.DATA_DIR,
        key=config.STORAGE_KEY,
    )


def inventory_store(data_dir: Path | None = None) -> InventoryStore:
    return InventoryStore(inventory_storage(data_dir))
