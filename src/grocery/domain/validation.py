"""Validation of candidate product records.

Rules are checked in a fixed order and the first failure wins, so the
user is told about one problem at a time.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict
from decimal import Decimal
from enum import Enum

from grocery.domain.exceptions import ValidationError
from grocery.domain.model.product import ProductRecord
from grocery.domain.model.value_objects import Category, Money, parse_number

FIELDS = (
    "product_id",
    "category",
    "product_name",
    "quantity",
    "mrp",
    "selling_price",
)

# Stored / form spelling -> attribute name
FIELD_ALIASES = {
    "productId": "product_id",
    "productName": "product_name",
    "sellingPrice": "selling_price",
}


def normalize_field_name(name: str) -> str | None:
    """Map a field name in either spelling to its attribute name."""
    name = FIELD_ALIASES.get(name, name)
    return name if name in FIELDS else None


def _as_mapping(candidate: ProductRecord | Mapping[str, object]) -> dict[str, object]:
    if isinstance(candidate, ProductRecord):
        return asdict(candidate)
    fields: dict[str, object] = {}
    for key, value in candidate.items():
        name = normalize_field_name(key)
        if name is not None:
            fields[name] = value
    return fields


def _text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip()


def _require_positive(value: object, message: str, rule: str) -> Decimal:
    number = parse_number(value)
    if number is None or number <= 0:
        raise ValidationError(message, rule=rule)
    return number


def validate(candidate: ProductRecord | Mapping[str, object]) -> ProductRecord:
    """Validate a candidate and return it as a clean ProductRecord.

    Raises ValidationError naming the first violated rule.
    """
    fields = _as_mapping(candidate)

    product_id = _text(fields.get("product_id"))
    if not product_id:
        raise ValidationError("Product ID is required", rule="product_id")

    product_name = _text(fields.get("product_name"))
    if not product_name:
        raise ValidationError("Product Name is required", rule="product_name")

    quantity = _require_positive(
        fields.get("quantity"), "Please enter a valid quantity", "quantity"
    )
    if quantity != quantity.to_integral_value():
        raise ValidationError("Please enter a valid quantity", rule="quantity")

    mrp = _require_positive(fields.get("mrp"), "Please enter a valid MRP", "mrp")
    selling_price = _require_positive(
        fields.get("selling_price"),
        "Please enter a valid Selling Price",
        "selling_price",
    )
    if Money(selling_price) > Money(mrp):
        raise ValidationError(
            "Selling Price cannot be greater than MRP", rule="selling_price"
        )

    category = _text(fields.get("category")) or Category.default().value
    if category not in Category.values():
        raise ValidationError("Please select a valid category", rule="category")

    return ProductRecord(
        product_id=product_id,
        category=category,
        product_name=product_name,
        quantity=_text(fields["quantity"]),
        mrp=_text(fields["mrp"]),
        selling_price=_text(fields["selling_price"]),
    )
