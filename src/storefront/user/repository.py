"""Repository for the User aggregate."""

from storefront.domain import storefront
from storefront.shared.queries import paginate
from storefront.user.user import User, normalize_email


@storefront.repository(part_of=User)
class UserRepository:
    def find(self, user_id: str) -> User | None:
        return self._dao.query.filter(id=user_id).all().first

    def find_by_email(self, email: str) -> User | None:
        return self._dao.query.filter(email=normalize_email(email)).all().first

    def find_by_reset_token(self, token: str) -> User | None:
        """Find the holder of ``token``; expiry is checked by the caller."""
        if not token:
            return None
        return self._dao.query.filter(reset_password_token=token).all().first

    def newest_first(self, page: int, limit: int):
        return paginate(self._dao.query.order_by("-created_at"), page, limit)
