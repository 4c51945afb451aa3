"""Abstract persistence for the whole inventory.

Defined in the domain layer so the domain never depends on
infrastructure. The inventory is small and edited by hand, so it is
always read and written as one unit: a single durable slot holding
the full ordered collection.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from grocery.domain.model.product import ProductRecord


class InventoryStorage(ABC):

    @abstractmethod
    def load(self) -> list[ProductRecord]:
        """Return the persisted inventory in order.

        Returns an empty list when nothing has been saved yet or the
        stored contents cannot be read back as valid records.
        """

    @abstractmethod
    def save(self, records: list[ProductRecord]) -> None:
        """Overwrite the slot with the full inventory."""
