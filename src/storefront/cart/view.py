"""Read models for the cart routes: stored lines populated with product details."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product


class ForeignCartError(Exception):
    """The cart exists but belongs to another shopper."""


def empty_cart_view() -> dict:
    return {"id": None, "items": [], "subtotal": 0.0, "updated_at": None}


def _line_view(item, products) -> dict:
    product = products.find(item.product_id)
    return {
        "id": str(item.id),
        "product_id": str(item.product_id),
        "product": product.summary() if product else None,
        "quantity": item.quantity,
        "price": item.price,
        "line_total": item.line_total,
    }


def cart_view(cart: Cart | None) -> dict:
    if cart is None:
        return empty_cart_view()

    products = current_domain.repository_for(Product)
    return {
        "id": str(cart.id),
        "items": [_line_view(item, products) for item in cart.items],
        "subtotal": cart.subtotal,
        "updated_at": cart.updated_at.isoformat() if cart.updated_at else None,
    }


def cart_view_for(user_id) -> dict:
    return cart_view(current_domain.repository_for(Cart).for_user(user_id))


def owned_cart_view(cart_id, user_id) -> dict:
    """A cart looked up by id, as the checkout page loads it.

    Raises ``ObjectNotFoundError`` for an unknown id and ``ForeignCartError``
    when the cart belongs to someone other than ``user_id``.
    """
    cart = current_domain.repository_for(Cart).get(cart_id)
    if str(cart.user_id) != str(user_id):
        raise ForeignCartError(str(cart_id))
    return cart_view(cart)


def cart_line_view(user_id, item_id) -> dict:
    cart = current_domain.repository_for(Cart).for_user(user_id)
    if cart is None:
        raise ObjectNotFoundError("Cart not found")

    item = next((i for i in cart.items if str(i.id) == str(item_id)), None)
    if item is None:
        raise ObjectNotFoundError("Cart item not found")
    return _line_view(item, current_domain.repository_for(Product))
