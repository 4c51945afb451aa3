"""Application service: the add/edit product form.

Keeps a draft of the field values as the user enters them and turns it
into an add or an update on submit, depending on whether an existing
product is being edited.
"""

from __future__ import annotations

from dataclasses import asdict

from grocery.application.inventory_store import InventoryStore
from grocery.domain.exceptions import EntityNotFoundError, ValidationError
from grocery.domain.model.product import ProductRecord
from grocery.domain.model.value_objects import Category
from grocery.domain.validation import FIELDS, normalize_field_name, validate


def _empty_draft() -> dict[str, str]:
    draft = dict.fromkeys(FIELDS, "")
    draft["category"] = Category.default().value
    return draft


class FormController:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store
        self._draft = _empty_draft()
        self._editing = False

    @property
    def draft(self) -> dict[str, str]:
        return dict(self._draft)

    @property
    def is_editing(self) -> bool:
        return self._editing

    def set_field(self, name: str, value: object) -> None:
        field = normalize_field_name(name)
        if field is None:
            raise ValidationError(f"Unknown field: '{name}'")
        text = "" if value is None else str(getattr(value, "value", value))
        # The product ID identifies the record being edited.
        if field == "product_id" and self._editing and text != self._draft["product_id"]:
            raise ValidationError(
                "Product ID cannot be changed while editing", rule="product_id"
            )
        self._draft[field] = text

    def begin_edit(self, product_id: str) -> ProductRecord:
        """Load an existing product into the draft and switch to edit mode."""
        record = self._store.find_by_id(product_id)
        if record is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        self._draft = asdict(record)
        self._editing = True
        return record

    def submit(self) -> ProductRecord:
        """Validate the draft and add or update it in the store.

        On success the form is cleared. On failure the draft is kept so
        the user can correct it, and the error propagates.
        """
        record = validate(self._draft)
        if self._editing:
            saved = self._store.update(record)
        else:
            saved = self._store.add(record)
        self.reset()
        return saved

    def reset(self) -> None:
        self._draft = _empty_draft()
        self._editing = False
