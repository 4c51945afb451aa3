"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InventoryLineDTO:
    """Output: one row of the inventory list."""

    product_id: str
    product_name: str
    category: str
    quantity: str
    selling_price: str  # formatted, e.g. "₹1.50"


@dataclass(frozen=True)
class ProductDTO:
    """Output: a full product record as displayed to the user."""

    product_id: str
    category: str
    product_name: str
    quantity: str
    mrp: str
    selling_price: str
