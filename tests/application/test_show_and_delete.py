"""Integration tests for the inventory list and delete use cases."""

import pytest

from grocery.application.delete_product import DeleteProductHandler
from grocery.application.inventory_store import InventoryStore
from grocery.application.show_inventory import ShowInventoryHandler, ShowProductHandler
from grocery.domain.exceptions import EntityNotFoundError
from tests.fakes import FakeInventoryStorage, make_record


def _store(*records):
    return InventoryStore(FakeInventoryStorage(list(records)))


class TestShowInventory:

    def test_lines_in_insertion_order_with_formatted_price(self):
        store = _store(
            make_record("P1", selling_price="1.5"),
            make_record("P2", category="Dairy", product_name="Milk",
                        quantity="4", mrp="30", selling_price="28"),
        )
        lines = ShowInventoryHandler(store).handle()
        assert [line.product_id for line in lines] == ["P1", "P2"]
        assert lines[0].selling_price == "₹1.50"
        assert lines[1].product_name == "Milk"
        assert lines[1].category == "Dairy"
        assert lines[1].quantity == "4"
        assert lines[1].selling_price == "₹28.00"

    def test_empty_inventory(self):
        assert ShowInventoryHandler(_store()).handle() == []

    def test_show_product(self):
        dto = ShowProductHandler(_store(make_record("P1"))).handle("P1")
        assert dto.mrp == "₹2.00"
        assert dto.selling_price == "₹1.50"

    def test_show_missing_product(self):
        with pytest.raises(EntityNotFoundError):
            ShowProductHandler(_store()).handle("P1")


class TestDeleteProduct:

    def test_confirmed_delete_removes_record(self):
        store = _store(make_record("P1"), make_record("P2"))
        deleted = DeleteProductHandler(store).handle("P1", confirm=lambda: True)
        assert deleted
        assert [r.product_id for r in store.list()] == ["P2"]

    def test_declined_delete_is_noop(self):
        storage = FakeInventoryStorage([make_record("P1")])
        store = InventoryStore(storage)
        deleted = DeleteProductHandler(store).handle("P1", confirm=lambda: False)
        assert not deleted
        assert len(store) == 1
        assert storage.save_calls == 0

    def test_missing_product_rejected_without_asking(self):
        asked = []

        def confirm():
            asked.append(True)
            return True

        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(_store()).handle("P1", confirm=confirm)
        assert asked == []
