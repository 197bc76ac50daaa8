"""Application tests for the cart commands and the cart read model."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.cart.cart import Cart
from storefront.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from storefront.cart.view import cart_view_for


def _add(user_id, product_id, quantity=1):
    return current_domain.process(
        AddToCart(user_id=user_id, product_id=product_id, quantity=quantity),
        asynchronous=False,
    )


class TestAddToCart:
    def test_first_add_creates_cart(self, make_product):
        product = make_product(price=12.5)
        cart_id = _add("user-001", product.id, 2)
        cart = current_domain.repository_for(Cart).get(cart_id)
        assert str(cart.user_id) == "user-001"
        assert cart.line_for(product.id).quantity == 2
        assert cart.line_for(product.id).price == 12.5

    def test_one_cart_per_user(self, make_product):
        first = make_product()
        second = make_product()
        assert _add("user-001", first.id) == _add("user-001", second.id)
        assert _add("user-002", first.id) != _add("user-001", first.id)

    def test_repeat_add_increments(self, make_product):
        product = make_product()
        _add("user-001", product.id, 2)
        cart_id = _add("user-001", product.id, 3)
        cart = current_domain.repository_for(Cart).get(cart_id)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 5

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            _add("user-001", "missing")

    def test_quantity_below_one_rejected(self, make_product):
        product = make_product()
        with pytest.raises(ValidationError):
            _add("user-001", product.id, 0)


class TestUpdateAndRemove:
    def test_update_sets_quantity(self, make_product):
        product = make_product()
        cart_id = _add("user-001", product.id, 2)
        current_domain.process(
            UpdateCartQuantity(user_id="user-001", product_id=product.id, quantity=7),
            asynchronous=False,
        )
        assert current_domain.repository_for(Cart).get(cart_id).items[0].quantity == 7

    def test_update_without_cart(self, make_product):
        product = make_product()
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpdateCartQuantity(user_id="user-404", product_id=product.id, quantity=2),
                asynchronous=False,
            )

    def test_remove_line(self, make_product):
        kept = make_product()
        dropped = make_product()
        _add("user-001", kept.id)
        cart_id = _add("user-001", dropped.id)
        current_domain.process(RemoveFromCart(user_id="user-001", product_id=dropped.id), asynchronous=False)
        cart = current_domain.repository_for(Cart).get(cart_id)
        assert [str(i.product_id) for i in cart.items] == [str(kept.id)]

    def test_remove_absent_line_is_harmless(self, make_product):
        product = make_product()
        cart_id = _add("user-001", product.id)
        current_domain.process(RemoveFromCart(user_id="user-001", product_id="not-in-cart"), asynchronous=False)
        assert len(current_domain.repository_for(Cart).get(cart_id).items) == 1

    def test_remove_without_cart(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(RemoveFromCart(user_id="user-404", product_id="p"), asynchronous=False)


class TestCartView:
    def test_no_cart_yields_empty_view(self):
        assert cart_view_for("user-001") == {"id": None, "items": [], "subtotal": 0.0, "updated_at": None}

    def test_lines_carry_product_summary(self, make_product):
        product = make_product(title="Kettle", price=20.0)
        _add("user-001", product.id, 2)
        view = cart_view_for("user-001")
        assert view["subtotal"] == 40.0
        line = view["items"][0]
        assert line["product"]["title"] == "Kettle"
        assert line["line_total"] == 40.0
