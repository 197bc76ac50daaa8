"""Cart item management — commands and handler.

Every command names the acting user; a shopper only ever touches their own cart.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.domain import logger, storefront


@storefront.command(part_of="Cart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(default=1, min_value=1)


@storefront.command(part_of="Cart")
class UpdateCartQuantity:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="Cart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


def _existing_cart(repo, user_id):
    cart = repo.for_user(user_id)
    if cart is None:
        raise ObjectNotFoundError("Cart not found")
    return cart


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)

        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            cart = Cart.create(user_id=command.user_id)
            logger.info("cart_created", user_id=str(command.user_id), cart_id=str(cart.id))

        cart.add_item(
            product_id=command.product_id,
            quantity=command.quantity or 1,
            price=product.price,
        )
        repo.add(cart)
        return str(cart.id)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        repo = current_domain.repository_for(Cart)
        cart = _existing_cart(repo, command.user_id)
        cart.update_item_quantity(product_id=command.product_id, new_quantity=command.quantity)
        repo.add(cart)
        return str(cart.id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = _existing_cart(repo, command.user_id)
        cart.remove_item(product_id=command.product_id)
        repo.add(cart)
        return str(cart.id)
