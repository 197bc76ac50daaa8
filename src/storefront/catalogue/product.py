"""Product aggregate — the catalog record every cart, order, review and wishlist points at."""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String, Text

from storefront.catalogue.events import (
    ProductAdded,
    ProductPopularityIncreased,
    ProductRatingRecalculated,
)
from storefront.domain import storefront


class ProductAvailability(Enum):
    IN_STOCK = "In Stock"
    OUT_OF_STOCK = "Out of Stock"


def _utc_now():
    return datetime.now(UTC)


@storefront.aggregate
class Product:
    title = String(required=True, max_length=255)
    brand = String(required=True, max_length=100)
    category = String(required=True, max_length=100)
    sku = String(required=True, max_length=64)
    price = Float(required=True, min_value=0.0)
    original_price = Float(min_value=0.0)
    description = Text(required=True)
    quantity = Integer(required=True, min_value=1)
    availability = String(choices=ProductAvailability, default=ProductAvailability.IN_STOCK.value)
    main_image = String(required=True, max_length=1024)
    thumbnails = Text()  # JSON array of image URLs
    rating = Float(default=0.0)
    review_count = Integer(default=0)
    popularity_score = Integer(default=0)
    created_at = DateTime(default=_utc_now)
    updated_at = DateTime()

    @invariant.post
    def rating_must_be_within_scale(self):
        if self.rating is not None and not (0 <= self.rating <= 5):
            raise ValidationError({"rating": ["Rating must be between 0 and 5"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        title,
        brand,
        category,
        sku,
        price,
        description,
        main_image,
        quantity,
        original_price=None,
        availability=None,
        thumbnails=None,
    ):
        now = datetime.now(UTC)
        product = cls(
            title=title,
            brand=brand,
            category=category,
            sku=sku.strip(),
            price=price,
            original_price=original_price,
            description=description,
            main_image=main_image,
            quantity=quantity,
            availability=availability or ProductAvailability.IN_STOCK.value,
            thumbnails=json.dumps(thumbnails or []),
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                sku=product.sku,
                title=product.title,
                category=product.category,
                price=product.price,
            )
        )
        return product

    @property
    def thumbnail_urls(self) -> list[str]:
        return json.loads(self.thumbnails) if self.thumbnails else []

    # -------------------------------------------------------------------
    # Behaviour
    # -------------------------------------------------------------------
    def recalculate_rating(self, ratings):
        """Replace the cached rating with the average over ``ratings``.

        ``ratings`` must cover every review of the product, not just the
        newest one; the stored figure is never adjusted incrementally.
        """
        ratings = list(ratings)
        self.review_count = len(ratings)
        self.rating = sum(ratings) / len(ratings) if ratings else 0.0
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductRatingRecalculated(
                product_id=str(self.id),
                rating=self.rating,
                review_count=self.review_count,
            )
        )

    def increase_popularity(self, increment_by=1):
        if increment_by < 1:
            raise ValidationError({"increment_by": ["Popularity can only be increased"]})

        self.popularity_score = (self.popularity_score or 0) + increment_by
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductPopularityIncreased(
                product_id=str(self.id),
                increment_by=increment_by,
                popularity_score=self.popularity_score,
            )
        )

    def summary(self) -> dict:
        """Product fields embedded when carts, orders and wishlists are populated."""
        return {
            "id": str(self.id),
            "title": self.title,
            "brand": self.brand,
            "category": self.category,
            "price": self.price,
            "original_price": self.original_price,
            "main_image": self.main_image,
            "availability": self.availability,
        }

    def detail(self) -> dict:
        return {
            **self.summary(),
            "sku": self.sku,
            "description": self.description,
            "quantity": self.quantity,
            "thumbnails": self.thumbnail_urls,
            "rating": self.rating,
            "review_count": self.review_count,
            "popularity_score": self.popularity_score,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
