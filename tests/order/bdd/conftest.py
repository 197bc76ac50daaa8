"""Shared BDD fixtures and step definitions for checkout."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from pytest_bdd import given, parsers, then, when
from storefront.cart.cart import Cart
from storefront.cart.items import AddToCart
from storefront.order.confirmation import send_order_confirmation
from storefront.order.listing import list_orders
from storefront.order.order import Order
from storefront.order.placement import PlaceOrder
from storefront.order.status import UpdateOrderStatus


@pytest.fixture()
def shopper_id():
    return "shopper-bdd-002"


@pytest.fixture()
def checkout_state():
    return {"cart_id": None, "order_id": None, "exc": None}


def _check_out(user_id, state, shipping_details, shipping=0.0):
    try:
        order_id = current_domain.process(
            PlaceOrder(
                user_id=user_id,
                cart_id=state["cart_id"],
                shipping_details=json.dumps(shipping_details),
                shipping=shipping,
            ),
            asynchronous=False,
        )
    except (ValidationError, ObjectNotFoundError) as exc:
        state["exc"] = exc
        return
    state["order_id"] = order_id
    send_order_confirmation(current_domain.repository_for(Order).get(order_id))


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{title}" priced {price:f}'), target_fixture="product")
def a_product(make_product, title, price):
    return make_product(title=title, price=price)


@given(parsers.cfparse('the shopper has {qty:d} of "{title}" in the cart'))
def shopper_fills_cart(shopper_id, product, checkout_state, qty, title):
    checkout_state["cart_id"] = current_domain.process(
        AddToCart(user_id=shopper_id, product_id=product.id, quantity=qty),
        asynchronous=False,
    )


@given("the shopper has checked out")
def shopper_checked_out(shopper_id, checkout_state, shipping_details):
    _check_out(shopper_id, checkout_state, shipping_details)
    assert checkout_state["order_id"] is not None


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse("the shopper checks out with shipping {shipping:f}"))
def shopper_checks_out(shopper_id, checkout_state, shipping_details, shipping):
    checkout_state["order_id"] = None
    _check_out(shopper_id, checkout_state, shipping_details, shipping)


@when("another shopper checks out the cart")
def another_shopper_checks_out(checkout_state, shipping_details):
    _check_out("intruder-001", checkout_state, shipping_details)


@when(parsers.cfparse('an admin sets the order status to "{status}"'))
def admin_sets_status(checkout_state, status):
    current_domain.process(UpdateOrderStatus(order_id=checkout_state["order_id"], status=status), asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('an order is placed with status "{status}"'))
@then(parsers.cfparse('the order status is "{status}"'))
def order_status(checkout_state, status):
    assert current_domain.repository_for(Order).get(checkout_state["order_id"]).status == status


@then(parsers.cfparse("the order total is {total:f}"))
def order_total(checkout_state, total):
    assert current_domain.repository_for(Order).get(checkout_state["order_id"]).total == pytest.approx(total)


@then("the shopper's cart is empty")
def cart_is_empty(checkout_state):
    assert current_domain.repository_for(Cart).get(checkout_state["cart_id"]).is_empty


@then(parsers.cfparse("the shopper's cart still has {count:d} line"))
def cart_line_count(checkout_state, count):
    assert len(current_domain.repository_for(Cart).get(checkout_state["cart_id"]).items) == count


@then(parsers.cfparse('a confirmation email is sent to "{address}"'))
def confirmation_sent(outbox, address):
    assert len(outbox.sent_to(address)) == 1


@then(parsers.cfparse('the checkout is rejected because "{reason}"'))
def checkout_rejected(checkout_state, reason):
    assert isinstance(checkout_state["exc"], ValidationError)
    assert reason in checkout_state["exc"].messages["cart"]


@then("the cart is reported as not found")
def cart_not_found(checkout_state):
    assert isinstance(checkout_state["exc"], ObjectNotFoundError)


@then(parsers.cfparse("the shopper has {count:d} order"))
def shopper_order_count(shopper_id, count):
    assert list_orders(shopper_id, is_admin=False)["pagination"]["total"] == count
