"""Tests for cart line management on the Cart aggregate."""

import pytest
from protean.exceptions import ValidationError
from storefront.cart.cart import Cart
from storefront.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated


def _make_cart():
    return Cart.create(user_id="user-001")


class TestAddItem:
    def test_add_item(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2, 10.0)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2
        assert cart.items[0].price == 10.0

    def test_adding_same_product_sums_quantity(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2, 10.0)
        cart.add_item("prod-001", 2, 10.0)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 4

    def test_increment_keeps_original_price_snapshot(self):
        cart = _make_cart()
        cart.add_item("prod-001", 1, 10.0)
        cart.add_item("prod-001", 1, 12.5)
        assert cart.items[0].price == 10.0

    def test_different_products_get_separate_lines(self):
        cart = _make_cart()
        cart.add_item("prod-001", 1, 10.0)
        cart.add_item("prod-002", 1, 20.0)
        assert len(cart.items) == 2

    def test_zero_quantity_rejected(self):
        cart = _make_cart()
        with pytest.raises(ValidationError):
            cart.add_item("prod-001", 0, 10.0)

    def test_raises_event_with_line_quantity(self):
        cart = _make_cart()
        cart.add_item("prod-001", 1, 10.0)
        cart.add_item("prod-001", 3, 10.0)
        added = [e for e in cart._events if isinstance(e, CartItemAdded)]
        assert len(added) == 2
        assert added[-1].quantity_added == 3
        assert added[-1].line_quantity == 4


class TestUpdateQuantity:
    def test_overwrites_quantity(self):
        cart = _make_cart()
        cart.add_item("prod-001", 1, 10.0)
        cart.update_item_quantity("prod-001", 5)
        assert cart.items[0].quantity == 5

    def test_raises_event(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2, 10.0)
        cart._events.clear()
        cart.update_item_quantity("prod-001", 3)
        assert len(cart._events) == 1
        event = cart._events[0]
        assert isinstance(event, CartQuantityUpdated)
        assert event.previous_quantity == 2
        assert event.new_quantity == 3

    def test_absent_product_is_ignored(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2, 10.0)
        cart._events.clear()
        cart.update_item_quantity("prod-999", 5)
        assert cart.items[0].quantity == 2
        assert cart._events == []

    def test_quantity_below_one_rejected(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2, 10.0)
        with pytest.raises(ValidationError):
            cart.update_item_quantity("prod-001", 0)


class TestRemoveItem:
    def test_remove_item(self):
        cart = _make_cart()
        cart.add_item("prod-001", 1, 10.0)
        cart.add_item("prod-002", 1, 20.0)
        assert cart.remove_item("prod-001") is True
        assert [str(i.product_id) for i in cart.items] == ["prod-002"]

    def test_remove_raises_event(self):
        cart = _make_cart()
        cart.add_item("prod-001", 1, 10.0)
        cart.remove_item("prod-001")
        assert isinstance(cart._events[-1], CartItemRemoved)

    def test_removing_absent_product_leaves_cart_unchanged(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2, 10.0)
        cart._events.clear()
        assert cart.remove_item("prod-999") is False
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2
        assert cart._events == []


class TestTotalsAndClearing:
    def test_subtotal_uses_snapshots(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2, 10.0)
        cart.add_item("prod-002", 1, 5.5)
        assert cart.subtotal == 25.5

    def test_snapshot_copies_lines(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2, 10.0)
        assert cart.snapshot() == [{"product_id": "prod-001", "quantity": 2, "price": 10.0}]

    def test_clear_empties_cart(self):
        cart = _make_cart()
        cart.add_item("prod-001", 2, 10.0)
        cart.add_item("prod-002", 1, 5.0)
        cart.clear()
        assert cart.is_empty
        event = cart._events[-1]
        assert isinstance(event, CartCleared)
        assert event.items_cleared == 2
