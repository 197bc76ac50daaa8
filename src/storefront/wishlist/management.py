"""Wishlist commands — open, add and remove.

A shopper's wishlist is created empty the first time it is touched.
"""

from enum import Enum

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.wishlist.wishlist import Wishlist


class WishlistAction(Enum):
    ADD = "add"
    REMOVE = "remove"


@storefront.command(part_of="Wishlist")
class OpenWishlist:
    user_id = Identifier(required=True)


@storefront.command(part_of="Wishlist")
class UpdateWishlist:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    action = String(required=True, choices=WishlistAction)


def _wishlist_for(repo, user_id):
    wishlist = repo.for_user(user_id)
    if wishlist is None:
        wishlist = Wishlist.create(user_id=user_id)
        repo.add(wishlist)
    return wishlist


@storefront.command_handler(part_of=Wishlist)
class ManageWishlistHandler:
    @handle(OpenWishlist)
    def open_wishlist(self, command):
        return str(_wishlist_for(current_domain.repository_for(Wishlist), command.user_id).id)

    @handle(UpdateWishlist)
    def update_wishlist(self, command):
        """Apply the action and report what happened.

        Returns "added", "already_saved" or "removed".
        """
        current_domain.repository_for(Product).get(command.product_id)

        repo = current_domain.repository_for(Wishlist)
        wishlist = _wishlist_for(repo, command.user_id)

        if command.action == WishlistAction.ADD.value:
            outcome = "added" if wishlist.add_product(command.product_id) else "already_saved"
        else:
            wishlist.remove_product(command.product_id)
            outcome = "removed"

        repo.add(wishlist)
        return outcome
