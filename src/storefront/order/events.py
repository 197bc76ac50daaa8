"""Domain events for the Order aggregate."""

from protean.fields import Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A cart was checked out into a new order."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    item_count = Integer(required=True)
    subtotal = Float(required=True)
    shipping = Float(required=True)
    total = Float(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
