"""Read model for GET /wishlist: saved products with their catalog summary."""

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.wishlist.wishlist import Wishlist


def wishlist_view(user_id) -> dict:
    wishlist = current_domain.repository_for(Wishlist).for_user(user_id)
    if wishlist is None:
        return {"id": None, "products": []}

    products = current_domain.repository_for(Product)
    saved = []
    for product_id in wishlist.product_ids:
        product = products.find(product_id)
        # Products deleted from the catalog drop out of the listing
        if product is not None:
            saved.append(product.summary())

    return {"id": str(wishlist.id), "products": saved}
