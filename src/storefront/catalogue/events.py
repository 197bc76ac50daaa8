"""Domain events for the Product aggregate."""

from protean.fields import Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalog."""

    __version__ = 1

    product_id = Identifier(required=True)
    sku = String(required=True)
    title = String(required=True)
    category = String(required=True)
    price = Float(required=True)


@storefront.event(part_of="Product")
class ProductRatingRecalculated:
    """The product's average rating was recomputed from its reviews."""

    __version__ = 1

    product_id = Identifier(required=True)
    rating = Float(required=True)
    review_count = Integer(required=True)


@storefront.event(part_of="Product")
class ProductPopularityIncreased:
    __version__ = 1

    product_id = Identifier(required=True)
    increment_by = Integer(required=True)
    popularity_score = Integer(required=True)
