"""Shared BDD fixtures and step definitions for the cart."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then, when
from storefront.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from storefront.cart.view import cart_view_for


@pytest.fixture()
def shopper_id():
    return "shopper-bdd-001"


@pytest.fixture()
def catalog():
    """Products created by the scenario, keyed by title."""
    return {}


@pytest.fixture()
def error():
    return {"exc": None}


def _line(shopper_id, product):
    view = cart_view_for(shopper_id)
    return next(item for item in view["items"] if item["product_id"] == str(product.id))


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{title}" priced {price:f}'))
def a_product(make_product, catalog, title, price):
    catalog[title] = make_product(title=title, price=price)


@given(parsers.cfparse('the shopper has {qty:d} of "{title}" in the cart'))
@when(parsers.cfparse('the shopper adds {qty:d} of "{title}" to the cart'))
def add_to_cart(shopper_id, catalog, qty, title):
    current_domain.process(
        AddToCart(user_id=shopper_id, product_id=catalog[title].id, quantity=qty),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the shopper sets the quantity of "{title}" to {qty:d}'))
def set_quantity(shopper_id, catalog, title, qty, error):
    try:
        current_domain.process(
            UpdateCartQuantity(user_id=shopper_id, product_id=catalog[title].id, quantity=qty),
            asynchronous=False,
        )
    except ValidationError as exc:
        error["exc"] = exc


@when(parsers.cfparse('the shopper removes "{title}" from the cart'))
def remove_from_cart(shopper_id, catalog, title):
    current_domain.process(RemoveFromCart(user_id=shopper_id, product_id=catalog[title].id), asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.re(r"the cart has (?P<count>\d+) lines?"))
def cart_has_lines(shopper_id, count):
    assert len(cart_view_for(shopper_id)["items"]) == int(count)


@then(parsers.cfparse('the "{title}" line has quantity {qty:d}'))
def line_quantity(shopper_id, catalog, title, qty):
    assert _line(shopper_id, catalog[title])["quantity"] == qty


@then(parsers.cfparse("the cart subtotal is {amount:f}"))
def cart_subtotal(shopper_id, amount):
    assert cart_view_for(shopper_id)["subtotal"] == pytest.approx(amount)


@then("the cart change is rejected")
def change_rejected(error):
    assert isinstance(error["exc"], ValidationError)
