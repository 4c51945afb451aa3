"""Inventory aggregate: the ordered collection of product records.

Insertion order is the display order, so updates replace a record in
place instead of moving it to the end.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from grocery.domain.exceptions import DuplicateKeyError, EntityNotFoundError
from grocery.domain.model.product import ProductRecord


class Inventory:
    """Aggregate root for the store's products.

    Invariants:
    - no two records share a ``product_id``
    - records keep the order in which they were added
    """

    def __init__(self, records: Iterable[ProductRecord] = ()) -> None:
        self._records: list[ProductRecord] = []
        for record in records:
            self.add(record)

    @property
    def records(self) -> tuple[ProductRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ProductRecord]:
        return iter(tuple(self._records))

    def __contains__(self, product_id: object) -> bool:
        return self._index_of(product_id) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self._records == other._records

    def copy(self) -> Inventory:
        clone = Inventory()
        clone._records = list(self._records)
        return clone

    def get(self, product_id: str) -> ProductRecord | None:
        index = self._index_of(product_id)
        return None if index is None else self._records[index]

    def add(self, record: ProductRecord) -> None:
        """Append a record to the end of the collection."""
        if record.product_id in self:
            raise DuplicateKeyError("Product ID already exists")
        self._records.append(record)

    def replace(self, record: ProductRecord) -> ProductRecord:
        """Swap in ``record`` for the one sharing its ID; return the old one."""
        index = self._index_of(record.product_id)
        if index is None:
            raise EntityNotFoundError(
                f"Product with ID '{record.product_id}' not found"
            )
        previous = self._records[index]
        self._records[index] = record
        return previous

    def remove(self, product_id: str) -> ProductRecord:
        index = self._index_of(product_id)
        if index is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return self._records.pop(index)

    def _index_of(self, product_id: object) -> int | None:
        for i, record in enumerate(self._records):
            if record.product_id == product_id:
                return i
        return None
