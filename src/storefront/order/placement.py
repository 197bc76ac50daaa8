"""PlaceOrder — check a cart out into a new order.

The order insert and the cart clear are written by one handler, so they
commit in the same unit of work: either the order exists and the cart is
empty, or neither write happened.
"""

import json

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Float, Identifier, Text
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.domain import logger, storefront
from storefront.order.order import Order, ShippingDetails


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    shipping_details = Text(required=True)  # JSON object, see ShippingDetails
    shipping = Float(default=0.0, min_value=0.0)


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.get(command.cart_id)

        # Someone else's cart is reported exactly like a missing one
        if str(cart.user_id) != str(command.user_id):
            raise ObjectNotFoundError("Cart not found")

        if cart.is_empty:
            raise ValidationError({"cart": ["Cart is empty"]})

        products = current_domain.repository_for(Product)
        lines = []
        for line in cart.snapshot():
            product = products.find(line["product_id"])
            lines.append({**line, "title": product.title if product else None})

        shipping_details = (
            json.loads(command.shipping_details)
            if isinstance(command.shipping_details, str)
            else command.shipping_details
        )

        order = Order.place(
            user_id=command.user_id,
            cart_id=command.cart_id,
            lines=lines,
            shipping_details=ShippingDetails(**shipping_details),
            shipping=command.shipping,
        )
        current_domain.repository_for(Order).add(order)

        cart.clear()
        cart_repo.add(cart)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            items=len(lines),
            total=order.total,
        )
        return str(order.id)
