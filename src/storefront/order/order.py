"""Order aggregate — an immutable copy of a cart taken at checkout.

Lines are copied by value from the cart (product id, quantity and the price
snapshot), so later catalog or cart changes never alter an order. After
placement only the status moves; it may be set to any value of
``OrderStatus`` by an admin.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from storefront.domain import storefront
from storefront.order.events import OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


@storefront.value_object(part_of="Order")
class ShippingDetails:
    """Where and to whom the order ships, as entered at checkout."""

    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    company = String(max_length=150)
    country = String(required=True, max_length=100)
    address = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    phone = String(required=True, max_length=30)
    email = String(required=True, max_length=254)

    @invariant.post
    def email_must_look_like_an_address(self):
        if self.email and "@" not in self.email:
            raise ValidationError({"email": ["Enter a valid email address"]})


@storefront.entity(part_of="Order")
class OrderItem:
    product_id = Identifier(required=True)
    title = String(max_length=255)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


@storefront.aggregate
class Order:
    user_id = Identifier(required=True)
    cart_id = Identifier()
    items = HasMany(OrderItem)
    shipping_details = ValueObject(ShippingDetails, required=True)
    subtotal = Float(required=True, min_value=0.0)
    shipping = Float(default=0.0, min_value=0.0)
    total = Float(required=True, min_value=0.0)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, user_id, cart_id, lines, shipping_details, shipping=0.0):
        """Create a Pending order from cart lines.

        ``lines`` are dicts with product_id, quantity, price and an optional
        title. Totals are computed here from the price snapshots.
        """
        if not lines:
            raise ValidationError({"cart": ["Cart is empty"]})

        shipping = shipping or 0.0
        subtotal = sum(line["price"] * line["quantity"] for line in lines)
        now = datetime.now(UTC)

        order = cls(
            user_id=user_id,
            cart_id=cart_id,
            items=[
                OrderItem(
                    product_id=line["product_id"],
                    title=line.get("title"),
                    quantity=line["quantity"],
                    price=line["price"],
                )
                for line in lines
            ],
            shipping_details=shipping_details,
            subtotal=subtotal,
            shipping=shipping,
            total=subtotal + shipping,
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                cart_id=str(cart_id),
                item_count=len(lines),
                subtotal=order.subtotal,
                shipping=order.shipping,
                total=order.total,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def change_status(self, new_status):
        valid = {status.value for status in OrderStatus}
        if new_status not in valid:
            raise ValidationError({"status": [f"Invalid status '{new_status}'"]})

        previous_status = self.status
        if previous_status == new_status:
            return

        self.status = new_status
        self.updated_at = datetime.now(UTC)

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous_status,
                new_status=new_status,
            )
        )

    def belongs_to(self, user_id) -> bool:
        return str(self.user_id) == str(user_id)

    def detail(self) -> dict:
        details = self.shipping_details
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "items": [
                {
                    "product_id": str(item.product_id),
                    "title": item.title,
                    "quantity": item.quantity,
                    "price": item.price,
                    "line_total": item.line_total,
                }
                for item in self.items
            ],
            "shipping_details": {
                "first_name": details.first_name,
                "last_name": details.last_name,
                "company": details.company,
                "country": details.country,
                "address": details.address,
                "city": details.city,
                "phone": details.phone,
                "email": details.email,
            },
            "subtotal": self.subtotal,
            "shipping": self.shipping,
            "total": self.total,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
