"""Repository for the Order aggregate."""

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.shared.queries import paginate


@storefront.repository(part_of=Order)
class OrderRepository:
    def for_user(self, user_id, page: int, limit: int):
        """One page of a shopper's own orders, newest first."""
        query = self._dao.query.filter(user_id=str(user_id)).order_by("-created_at")
        return paginate(query, page, limit)

    def newest_first(self, page: int, limit: int):
        return paginate(self._dao.query.order_by("-created_at"), page, limit)
