"""Review aggregate — one rating and comment per shopper per product."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, Text

from storefront.domain import storefront
from storefront.review.events import ReviewSubmitted

MIN_RATING = 1
MAX_RATING = 5
MIN_BODY_LENGTH = 3
MAX_BODY_LENGTH = 500


def validate_review(rating, body):
    """Check rating and trimmed body against the review limits.

    Returns the trimmed body.
    """
    errors = {}
    if rating is None or not (MIN_RATING <= rating <= MAX_RATING):
        errors["rating"] = [f"Rating must be between {MIN_RATING} and {MAX_RATING}"]

    text = (body or "").strip()
    if not (MIN_BODY_LENGTH <= len(text) <= MAX_BODY_LENGTH):
        errors["review"] = [f"Review must be between {MIN_BODY_LENGTH} and {MAX_BODY_LENGTH} characters"]

    if errors:
        raise ValidationError(errors)
    return text


@storefront.aggregate
class Review:
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True, min_value=MIN_RATING, max_value=MAX_RATING)
    body = Text(required=True)
    created_at = DateTime()

    @invariant.post
    def body_must_fit_length_limits(self):
        if self.body is not None and not (MIN_BODY_LENGTH <= len(self.body) <= MAX_BODY_LENGTH):
            raise ValidationError(
                {"review": [f"Review must be between {MIN_BODY_LENGTH} and {MAX_BODY_LENGTH} characters"]}
            )

    @classmethod
    def submit(cls, product_id, user_id, rating, body):
        text = validate_review(rating, body)
        review = cls(
            product_id=product_id,
            user_id=user_id,
            rating=rating,
            body=text,
            created_at=datetime.now(UTC),
        )
        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                product_id=str(product_id),
                user_id=str(user_id),
                rating=rating,
            )
        )
        return review
