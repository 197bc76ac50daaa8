"""Repository for the Product aggregate."""

from protean.utils.query import Q

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.shared.queries import paginate

SEARCH_FIELDS = ("title", "description", "category", "brand")


@storefront.repository(part_of=Product)
class ProductRepository:
    def find(self, product_id) -> Product | None:
        return self._dao.query.filter(id=str(product_id)).all().first

    def find_by_sku(self, sku: str) -> Product | None:
        return self._dao.query.filter(sku=sku.strip()).all().first

    def listing(self, page: int, limit: int, category: str | None = None):
        """One page of the catalog, newest first."""
        query = self._dao.query.order_by("-created_at")
        if category:
            query = query.filter(category=category)
        return paginate(query, page, limit)

    def search(self, term: str, limit: int = 10) -> list[Product]:
        """Case-insensitive substring match across the text fields.

        No relevance ranking: matches come back newest first.
        """
        needle = term.strip()
        if not needle:
            return []

        criteria = Q()
        for field in SEARCH_FIELDS:
            criteria |= Q(**{f"{field}__icontains": needle})
        return list(self._dao.query.filter(criteria).order_by("-created_at").limit(limit).all().items)
