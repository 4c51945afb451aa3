"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

from grocery.domain.exceptions import ValidationError

# Plain ASCII decimal with optional sign and exponent: "10", "-2.5", ".5", "1e3"
_NUMBER_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)

_CENTS = Decimal("0.01")


class Category(str, Enum):
    """The closed set of product categories offered by the store."""

    FRUITS = "Fruits"
    VEGETABLES = "Vegetables"
    DAIRY = "Dairy"

    @classmethod
    def default(cls) -> Category:
        return cls.FRUITS

    @classmethod
    def values(cls) -> list[str]:
        return [c.value for c in cls]


def parse_number(raw: object) -> Decimal | None:
    """Parse user-entered numeric text.

    Returns None for anything that is missing or not a plain finite
    number, so callers can treat "unparseable" exactly like "not
    provided".
    """
    if raw is None or isinstance(raw, bool):
        return None
    text = str(raw).strip()
    if not _NUMBER_PATTERN.fullmatch(text):
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


@dataclass(frozen=True)
class Money:
    """Monetary amount in rupees.

    Uses Decimal to avoid floating-point rounding errors.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __str__(self) -> str:
        # Half-up, the way shop prices are rounded for display.
        try:
            amount = self.amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            # Too many digits to quantize at the context precision.
            return f"₹{self.amount:.2f}"
        return f"₹{amount}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        value = parse_number(amount)
        if value is None:
            raise ValidationError(f"Invalid money amount: {amount!r}")
        return Money(value)
