"""Repository for the Review aggregate."""

from storefront.domain import storefront
from storefront.review.review import Review
from storefront.shared.queries import fetch_all


@storefront.repository(part_of=Review)
class ReviewRepository:
    def by_user_for_product(self, user_id, product_id) -> Review | None:
        return self._dao.query.filter(user_id=str(user_id), product_id=str(product_id)).all().first

    def for_product(self, product_id) -> list[Review]:
        """Every review of a product, newest first."""
        return fetch_all(self._dao.query.filter(product_id=str(product_id)).order_by("-created_at"))
