"""Application service: Delete Product use case."""

from __future__ import annotations

from collections.abc import Callable

from grocery.application.inventory_store import InventoryStore
from grocery.domain.exceptions import EntityNotFoundError


class DeleteProductHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, product_id: str, confirm: Callable[[], bool]) -> bool:
        """Delete a product once the user has confirmed.

        Returns False without touching the inventory if the user
        declines. Raises EntityNotFoundError before asking if the
        product does not exist.
        """
        if self._store.find_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if not confirm():
            return False

        self._store.remove(product_id)
        return True
