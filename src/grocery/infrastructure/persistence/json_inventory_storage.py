"""JSON-file-backed implementation of InventoryStorage.

The inventory lives in one named slot: ``<data_dir>/<key>.json``, a JSON
array of objects with camelCase keys. Numeric fields are written as the
text the user entered.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from grocery.domain.exceptions import DomainException
from grocery.domain.model.inventory import Inventory
from grocery.domain.model.product import ProductRecord
from grocery.domain.repository.inventory_storage import InventoryStorage
from grocery.domain.validation import validate

logger = logging.getLogger(__name__)

DEFAULT_KEY = "groceryInventory"


class JsonInventoryStorage(InventoryStorage):

    def __init__(self, data_dir: Path, key: str = DEFAULT_KEY) -> None:
        self._file_path = Path(data_dir) / f"{key}.json"

    # --- InventoryStorage interface -------------------------------------------

    def load(self) -> list[ProductRecord]:
        if not self._file_path.exists():
            logger.debug("No inventory slot at %s, starting empty", self._file_path)
            return []

        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            records = self._to_domain_list(raw)
        except (OSError, ValueError, TypeError, KeyError, DomainException) as exc:
            moved_to = self._quarantine()
            logger.warning(
                "Ignoring unreadable inventory slot %s (%s); moved it to %s",
                self._file_path,
                exc,
                moved_to,
            )
            return []

        logger.debug("Loaded %d record(s) from %s", len(records), self._file_path)
        return records

    def save(self, records: list[ProductRecord]) -> None:
        raw = [self._to_raw(record) for record in records]
        self._write_atomic(json.dumps(raw, indent=2, ensure_ascii=False) + "\n")
        logger.debug("Saved %d record(s) to %s", len(raw), self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: ProductRecord) -> dict:
        return {
            "productId": record.product_id,
            "category": record.category,
            "productName": record.product_name,
            "quantity": record.quantity,
            "mrp": record.mrp,
            "sellingPrice": record.selling_price,
        }

    @staticmethod
    def _to_domain(raw: dict) -> ProductRecord:
        if not isinstance(raw, dict):
            raise TypeError(f"Expected an object, got {type(raw).__name__}")
        return validate(
            {
                "product_id": raw["productId"],
                "category": raw["category"],
                "product_name": raw["productName"],
                "quantity": raw["quantity"],
                "mrp": raw["mrp"],
                "selling_price": raw["sellingPrice"],
            }
        )

    def _to_domain_list(self, raw: object) -> list[ProductRecord]:
        if not isinstance(raw, list):
            raise TypeError(f"Expected a list, got {type(raw).__name__}")
        # Building the aggregate rejects duplicate IDs.
        return list(Inventory(self._to_domain(item) for item in raw).records)

    # --- File helpers ---------------------------------------------------------

    def _quarantine(self) -> Path:
        """Move the unreadable slot aside so the next save cannot overwrite it."""
        target = self._file_path.with_name(f"{self._file_path.name}.corrupt")
        n = 1
        while target.exists():
            target = self._file_path.with_name(f"{self._file_path.name}.corrupt.{n}")
            n += 1
        os.replace(self._file_path, target)
        return target

    def _write_atomic(self, text: str) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
