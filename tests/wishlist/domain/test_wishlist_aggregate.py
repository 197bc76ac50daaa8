"""Tests for the Wishlist aggregate."""

from storefront.wishlist.events import WishlistProductAdded, WishlistProductRemoved
from storefront.wishlist.wishlist import Wishlist


def _make_wishlist():
    return Wishlist.create(user_id="user-001")


class TestAddProduct:
    def test_add(self):
        wishlist = _make_wishlist()
        assert wishlist.add_product("prod-001") is True
        assert wishlist.product_ids == ["prod-001"]

    def test_adding_twice_keeps_one_entry(self):
        wishlist = _make_wishlist()
        wishlist.add_product("prod-001")
        assert wishlist.add_product("prod-001") is False
        assert wishlist.product_ids == ["prod-001"]

    def test_duplicate_add_raises_no_event(self):
        wishlist = _make_wishlist()
        wishlist.add_product("prod-001")
        wishlist._events.clear()
        wishlist.add_product("prod-001")
        assert wishlist._events == []

    def test_add_raises_event(self):
        wishlist = _make_wishlist()
        wishlist.add_product("prod-001")
        assert isinstance(wishlist._events[-1], WishlistProductAdded)


class TestRemoveProduct:
    def test_remove(self):
        wishlist = _make_wishlist()
        wishlist.add_product("prod-001")
        wishlist.add_product("prod-002")
        assert wishlist.remove_product("prod-001") is True
        assert wishlist.product_ids == ["prod-002"]
        assert isinstance(wishlist._events[-1], WishlistProductRemoved)

    def test_removing_absent_product(self):
        wishlist = _make_wishlist()
        assert wishlist.remove_product("prod-404") is False
        assert wishlist.product_ids == []
