"""Public review listing for a product page."""

from protean.utils.globals import current_domain

from storefront.review.review import Review
from storefront.user.user import User


def reviews_for_product(product_id) -> list[dict]:
    reviews = current_domain.repository_for(Review).for_product(product_id)
    users = current_domain.repository_for(User)

    names = {}
    listing = []
    for review in reviews:
        user_id = str(review.user_id)
        if user_id not in names:
            user = users.find(user_id)
            names[user_id] = user.name if user else None
        listing.append(
            {
                "id": str(review.id),
                "product_id": str(review.product_id),
                "user": {"id": user_id, "name": names[user_id]},
                "rating": review.rating,
                "review": review.body,
                "created_at": review.created_at.isoformat() if review.created_at else None,
            }
        )
    return listing
