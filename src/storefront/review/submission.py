"""SubmitReview — add a review and refresh the product's rating.

The review insert and the product's rating/review_count update are made by
the same handler and commit together. The average is always recomputed over
every review of the product.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import logger, storefront
from storefront.review.review import Review, validate_review


@storefront.command(part_of="Review")
class SubmitReview:
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    body = Text(required=True)


@storefront.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        validate_review(command.rating, command.body)

        products = current_domain.repository_for(Product)
        product = products.get(command.product_id)

        repo = current_domain.repository_for(Review)
        if repo.by_user_for_product(command.user_id, command.product_id) is not None:
            raise ValidationError({"review": ["You have already reviewed this product"]})

        existing = repo.for_product(command.product_id)

        review = Review.submit(
            product_id=command.product_id,
            user_id=command.user_id,
            rating=command.rating,
            body=command.body,
        )
        repo.add(review)

        ratings = [r.rating for r in existing if str(r.id) != str(review.id)] + [review.rating]
        product.recalculate_rating(ratings)
        products.add(product)

        logger.info(
            "review_submitted",
            review_id=str(review.id),
            product_id=str(product.id),
            rating=review.rating,
            product_rating=product.rating,
        )
        return str(review.id)
