"""Cart aggregate — one per shopper, holding the lines that become an order at checkout.

Each line stores the product's price as it was when the product was first
added. Later price changes in the catalog do not touch existing lines.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer

from storefront.cart.events import (
    CartCleared,
    CartItemAdded,
    CartItemRemoved,
    CartQuantityUpdated,
)
from storefront.domain import storefront


@storefront.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)  # snapshot at add time
    added_at = DateTime()

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


@storefront.aggregate
class Cart:
    user_id = Identifier(required=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def line_for(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def subtotal(self) -> float:
        return sum(item.line_total for item in self.items)

    def snapshot(self) -> list[dict]:
        """Lines copied by value, as an order keeps them."""
        return [
            {"product_id": str(item.product_id), "quantity": item.quantity, "price": item.price}
            for item in self.items
        ]

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, quantity, price):
        """Add ``quantity`` of a product, or top up the line already holding it."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        now = datetime.now(UTC)
        existing = self.line_for(product_id)

        if existing:
            existing.quantity += quantity
            line = existing
        else:
            line = CartItem(product_id=product_id, quantity=quantity, price=price, added_at=now)
            self.add_items(line)

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                product_id=str(product_id),
                quantity_added=quantity,
                line_quantity=line.quantity,
                price=line.price,
            )
        )

    def update_item_quantity(self, product_id, new_quantity):
        """Overwrite the quantity of a line. A product not in the cart is ignored."""
        if new_quantity is None or new_quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        item = self.line_for(product_id)
        if item is None:
            return

        previous_quantity = item.quantity
        item.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def remove_item(self, product_id):
        """Drop the line for a product. Removing an absent product is a no-op."""
        item = self.line_for(product_id)
        if item is None:
            return False

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemRemoved(cart_id=str(self.id), product_id=str(product_id)))
        return True

    def clear(self):
        cleared = len(self.items)
        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartCleared(cart_id=str(self.id), items_cleared=cleared))
