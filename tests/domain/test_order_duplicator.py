"""Unit tests for the Order Duplicator."""

import pytest

from creational.domain.exceptions import DuplicationError
from creational.domain.model.order import DiscountEntry, LineItem, OrderRecord
from creational.domain.service.order_duplicator import duplicate


def _make_order() -> OrderRecord:
    """The reference order: laptop, two mice, student discount."""
    order = OrderRecord(delivery_cost=1500.0, payment_method="Card")
    order.add_item(LineItem("Laptop", 500000.0, 1))
    order.add_item(LineItem("Mouse", 10000.0, 2))
    order.add_discount(DiscountEntry("Student", 10.0))
    return order


class TestDuplicateValues:

    def test_items_equal_by_value(self):
        order = _make_order()
        copy = duplicate(order)
        assert len(copy.items) == len(order.items)
        for i, item in enumerate(order.items):
            assert copy.items[i] == item

    def test_discounts_equal_by_value(self):
        order = _make_order()
        copy = duplicate(order)
        assert copy.discounts == order.discounts

    def test_scalars_copied(self):
        copy = duplicate(_make_order())
        assert copy.delivery_cost == 1500.0
        assert copy.payment_method == "Card"

    def test_order_preserved(self):
        copy = duplicate(_make_order())
        assert [i.name for i in copy.items] == ["Laptop", "Mouse"]

    def test_whole_record_equal(self):
        order = _make_order()
        assert duplicate(order) == order

    def test_empty_order(self):
        copy = duplicate(OrderRecord())
        assert copy.items == []
        assert copy.discounts == []
        assert copy.delivery_cost == 0.0
        assert copy.payment_method == ""

    def test_duplicate_of_duplicate_equals_original(self):
        order = _make_order()
        twice = duplicate(duplicate(order))
        assert twice == order
        assert twice is not order
        assert twice.items is not order.items
        assert all(a is not b for a, b in zip(twice.items, order.items))


class TestDuplicateIndependence:

    def test_no_shared_sequences(self):
        order = _make_order()
        copy = duplicate(order)
        assert copy.items is not order.items
        assert copy.discounts is not order.discounts

    def test_no_shared_elements(self):
        order = _make_order()
        copy = duplicate(order)
        for original, copied in zip(order.items, copy.items):
            assert original is not copied
        for original, copied in zip(order.discounts, copy.discounts):
            assert original is not copied

    @pytest.mark.parametrize("index", [0, 1])
    def test_mutating_copied_item_quantity(self, index):
        order = _make_order()
        copy = duplicate(order)
        before = order.items[index].quantity
        copy.items[index].quantity = 99
        assert order.items[index].quantity == before

    def test_mutating_original_item_does_not_touch_copy(self):
        order = _make_order()
        copy = duplicate(order)
        order.items[0].unit_price = 1.0
        order.discounts[0].percent = 50.0
        assert copy.items[0].unit_price == 500000.0
        assert copy.discounts[0].percent == 10.0

    def test_changing_copy_payment_method(self):
        order = _make_order()
        copy = duplicate(order)
        copy.payment_method = "Cash"
        assert order.payment_method == "Card"
        assert copy.payment_method == "Cash"
        assert [(i.name, i.unit_price, i.quantity) for i in order.items] == [
            ("Laptop", 500000.0, 1),
            ("Mouse", 10000.0, 2),
        ]
        assert copy.items == order.items

    def test_appending_to_copy(self):
        order = _make_order()
        copy = duplicate(order)
        copy.add_item(LineItem("Keyboard", 20000.0, 1))
        assert len(order.items) == 2
        assert len(copy.items) == 3

    def test_removing_from_copy(self):
        order = _make_order()
        copy = duplicate(order)
        copy.discounts.clear()
        assert len(order.discounts) == 1

    def test_source_not_mutated(self):
        order = _make_order()
        items_before = order.items
        duplicate(order)
        assert order.items is items_before
        assert order == _make_order()


class TestDuplicationErrors:

    def test_unsupported_item_type(self):
        order = _make_order()
        bogus = ("Cable", 500.0, 3)
        order.items.append(bogus)  # type: ignore[arg-type]
        with pytest.raises(DuplicationError, match=r"items\[2\]") as excinfo:
            duplicate(order)
        assert excinfo.value.element is bogus

    def test_unsupported_discount_type(self):
        order = _make_order()
        order.discounts.insert(0, LineItem("Oops", 1.0, 1))  # type: ignore[arg-type]
        with pytest.raises(DuplicationError, match=r"discounts\[0\].*LineItem"):
            duplicate(order)

    def test_subclass_rejected(self):
        class PromoItem(LineItem):
            pass

        order = OrderRecord()
        order.add_item(PromoItem("Gift", 0.0, 1))
        with pytest.raises(DuplicationError, match="PromoItem"):
            duplicate(order)
