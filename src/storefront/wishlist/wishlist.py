"""Wishlist aggregate — a per-shopper set of saved products."""

from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Identifier

from storefront.domain import storefront
from storefront.wishlist.events import WishlistProductAdded, WishlistProductRemoved


@storefront.entity(part_of="Wishlist")
class WishlistItem:
    product_id = Identifier(required=True)
    added_at = DateTime()


@storefront.aggregate
class Wishlist:
    user_id = Identifier(required=True)
    items = HasMany(WishlistItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    @property
    def product_ids(self) -> list[str]:
        return [str(item.product_id) for item in self.items]

    def contains(self, product_id) -> bool:
        return str(product_id) in self.product_ids

    def add_product(self, product_id) -> bool:
        """Save a product. Returns False when it was already saved."""
        if self.contains(product_id):
            return False

        now = datetime.now(UTC)
        self.add_items(WishlistItem(product_id=product_id, added_at=now))
        self.updated_at = now
        self.raise_(
            WishlistProductAdded(wishlist_id=str(self.id), user_id=str(self.user_id), product_id=str(product_id))
        )
        return True

    def remove_product(self, product_id) -> bool:
        item = next((i for i in self.items if str(i.product_id) == str(product_id)), None)
        if item is None:
            return False

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)
        self.raise_(
            WishlistProductRemoved(wishlist_id=str(self.id), user_id=str(self.user_id), product_id=str(product_id))
        )
        return True
