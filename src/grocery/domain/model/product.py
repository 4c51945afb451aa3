"""ProductRecord: the single entity managed by the inventory.

Records are immutable. An edit produces a new record with the same
``product_id`` which replaces the old one in the inventory.
"""

from __future__ import annotations

from dataclasses import dataclass

from grocery.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductRecord:
    """A product line held by the store.

    Numeric fields keep the text the user entered (``"10"``, ``"2.00"``)
    so the persisted slot round-trips exactly what was typed. Use the
    money properties when a price is needed.
    """

    product_id: str
    category: str
    product_name: str
    quantity: str
    mrp: str
    selling_price: str

    @property
    def mrp_money(self) -> Money:
        return Money.of(self.mrp)

    @property
    def selling_price_money(self) -> Money:
        return Money.of(self.selling_price)
