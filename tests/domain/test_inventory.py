"""Unit tests for the Inventory aggregate."""

import pytest

from grocery.domain.exceptions import DuplicateKeyError, EntityNotFoundError
from grocery.domain.model.inventory import Inventory
from tests.fakes import make_record


class TestInventoryAdd:

    def test_add_appends_in_order(self):
        inv = Inventory()
        inv.add(make_record("P1"))
        inv.add(make_record("P2", product_name="Banana"))
        assert [r.product_id for r in inv] == ["P1", "P2"]

    def test_duplicate_id_rejected(self):
        inv = Inventory([make_record("P1")])
        with pytest.raises(DuplicateKeyError, match="already exists"):
            inv.add(make_record("P1", product_name="Other"))
        assert len(inv) == 1

    def test_constructor_rejects_duplicates(self):
        with pytest.raises(DuplicateKeyError):
            Inventory([make_record("P1"), make_record("P1")])


class TestInventoryReplace:

    def test_replace_keeps_position(self):
        inv = Inventory([make_record("P1"), make_record("P2"), make_record("P3")])
        old = inv.replace(make_record("P2", product_name="Mango"))
        assert old.product_name == "Apple"
        assert [r.product_id for r in inv] == ["P1", "P2", "P3"]
        assert inv.get("P2").product_name == "Mango"

    def test_replace_missing_rejected(self):
        inv = Inventory([make_record("P1")])
        with pytest.raises(EntityNotFoundError, match="not found"):
            inv.replace(make_record("P9"))


class TestInventoryRemove:

    def test_remove_exactly_one(self):
        inv = Inventory([make_record("P1"), make_record("P2")])
        removed = inv.remove("P1")
        assert removed.product_id == "P1"
        assert [r.product_id for r in inv] == ["P2"]

    def test_remove_missing_rejected(self):
        inv = Inventory([make_record("P1")])
        with pytest.raises(EntityNotFoundError):
            inv.remove("P9")
        assert len(inv) == 1


class TestInventoryCopy:

    def test_copy_is_independent(self):
        inv = Inventory([make_record("P1")])
        clone = inv.copy()
        clone.add(make_record("P2"))
        assert len(inv) == 1
        assert len(clone) == 2

    def test_equality_by_records(self):
        assert Inventory([make_record("P1")]) == Inventory([make_record("P1")])
        assert Inventory([make_record("P1")]) != Inventory([make_record("P2")])

    def test_contains_and_get(self):
        inv = Inventory([make_record("P1")])
        assert "P1" in inv
        assert "P2" not in inv
        assert inv.get("P2") is None
