"""Order read paths, scoped by the caller's role.

Shoppers see their own orders; admins see every order along with a summary
of the user who placed it.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.order.order import Order
from storefront.user.user import User


def _user_summaries(user_ids):
    users = current_domain.repository_for(User)
    summaries = {}
    for user_id in set(user_ids):
        user = users.find(user_id)
        summaries[user_id] = user.summary() if user else None
    return summaries


def list_orders(user_id, is_admin: bool, page: int = 1, limit: int = 10) -> dict:
    repo = current_domain.repository_for(Order)
    result = repo.newest_first(page, limit) if is_admin else repo.for_user(user_id, page, limit)

    orders = [order.detail() for order in result.items]
    if is_admin:
        summaries = _user_summaries(order["user_id"] for order in orders)
        for order in orders:
            order["user"] = summaries.get(order["user_id"])

    return {"orders": orders, "pagination": result.pagination()}


def get_order(order_id, user_id, is_admin: bool) -> dict:
    order = current_domain.repository_for(Order).get(order_id)
    if not is_admin and not order.belongs_to(user_id):
        raise ObjectNotFoundError("Order not found")
    return order.detail()
