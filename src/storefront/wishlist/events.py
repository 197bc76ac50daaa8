"""Domain events for the Wishlist aggregate."""

from protean.fields import Identifier

from storefront.domain import storefront


@storefront.event(part_of="Wishlist")
class WishlistProductAdded:
    __version__ = 1

    wishlist_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.event(part_of="Wishlist")
class WishlistProductRemoved:
    __version__ = 1

    wishlist_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
