"""Unit tests for the ProductRecord entity."""

import dataclasses

import pytest

from grocery.domain.model.value_objects import Money
from tests.fakes import make_record


class TestProductRecord:

    def test_money_accessors(self):
        record = make_record(mrp="2.00", selling_price="1.5")
        assert record.mrp_money == Money.of("2.00")
        assert str(record.selling_price_money) == "₹1.50"

    def test_records_are_immutable(self):
        record = make_record()
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.product_name = "Pear"
