"""Application service: Show Inventory use cases (queries)."""

from __future__ import annotations

from grocery.application.dto import InventoryLineDTO, ProductDTO
from grocery.application.inventory_store import InventoryStore
from grocery.domain.exceptions import EntityNotFoundError
from grocery.domain.model.product import ProductRecord


class ShowInventoryHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self) -> list[InventoryLineDTO]:
        return [
            InventoryLineDTO(
                product_id=record.product_id,
                product_name=record.product_name,
                category=record.category,
                quantity=record.quantity,
                selling_price=str(record.selling_price_money),
            )
            for record in self._store.list()
        ]


class ShowProductHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, product_id: str) -> ProductDTO:
        record = self._store.find_by_id(product_id)
        if record is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return self._to_dto(record)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(record: ProductRecord) -> ProductDTO:
        return ProductDTO(
            product_id=record.product_id,
            category=record.category,
            product_name=record.product_name,
            quantity=record.quantity,
            mrp=str(record.mrp_money),
            selling_price=str(record.selling_price_money),
        )
