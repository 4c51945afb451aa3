"""Application service: the Inventory Store.

Owns the in-memory inventory and keeps the durable copy in step with
it. Every mutation is validate, apply to a working copy, persist, and
only then publish the copy, so a failed save never leaves a
half-applied change visible.
"""

from __future__ import annotations

import logging

from grocery.domain.model.inventory import Inventory
from grocery.domain.model.product import ProductRecord
from grocery.domain.repository.inventory_storage import InventoryStorage
from grocery.domain.validation import validate

logger = logging.getLogger(__name__)


class InventoryStore:

    def __init__(self, storage: InventoryStorage) -> None:
        self._storage = storage
        self._inventory = Inventory(storage.load())
        logger.debug("Hydrated inventory with %d record(s)", len(self._inventory))

    # --- Queries --------------------------------------------------------------

    def list(self) -> tuple[ProductRecord, ...]:
        """Return the current records in insertion order."""
        return self._inventory.records

    def find_by_id(self, product_id: str) -> ProductRecord | None:
        return self._inventory.get(product_id)

    def __len__(self) -> int:
        return len(self._inventory)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._inventory

    # --- Commands -------------------------------------------------------------

    def add(self, record: ProductRecord) -> ProductRecord:
        """Validate and append a new record.

        Raises ValidationError for an invalid record and DuplicateKeyError
        if the product ID is already taken.
        """
        record = validate(record)
        working = self._inventory.copy()
        working.add(record)
        self._commit(working)
        logger.info("Added product %s (%s)", record.product_id, record.product_name)
        return record

    def update(self, record: ProductRecord) -> ProductRecord:
        """Replace the record sharing ``record.product_id``, keeping its position.

        Raises ValidationError for an invalid record and
        EntityNotFoundError if no such product exists.
        """
        record = validate(record)
        working = self._inventory.copy()
        working.replace(record)
        self._commit(working)
        logger.info("Updated product %s", record.product_id)
        return record

    def remove(self, product_id: str) -> ProductRecord:
        """Remove a record. Raises EntityNotFoundError if it does not exist."""
        working = self._inventory.copy()
        removed = working.remove(product_id)
        self._commit(working)
        logger.info("Removed product %s", product_id)
        return removed

    # --- Internal helpers -----------------------------------------------------

    def _commit(self, working: Inventory) -> None:
        self._storage.save(list(working.records))
        self._inventory = working
