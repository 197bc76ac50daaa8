"""User aggregate — shopper and admin accounts, including the password reset token.

Passwords are stored only as bcrypt hashes. A reset token is valid while its
expiry lies in the future and is cleared the moment it is redeemed, so each
token works at most once.
"""

from datetime import UTC, datetime, timedelta
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from storefront.domain import storefront
from storefront.user.events import (
    PasswordChanged,
    PasswordResetRequested,
    UserRegistered,
    UserRoleChanged,
)

RESET_TOKEN_TTL = timedelta(hours=1)


class UserRole(Enum):
    USER = "user"
    ADMIN = "admin"


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _as_utc(value: datetime) -> datetime:
    # SQL providers may hand back naive datetimes
    return value if value.tzinfo else value.replace(tzinfo=UTC)


@storefront.aggregate
class User:
    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    password_hash = String(max_length=255)
    role = String(choices=UserRole, default=UserRole.USER.value)
    reset_password_token = String(max_length=64)
    reset_password_expires = DateTime()
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def email_must_be_normalized(self):
        if self.email and self.email != normalize_email(self.email):
            raise ValidationError({"email": ["Email must be lower-case without surrounding spaces"]})

    @invariant.post
    def reset_token_and_expiry_travel_together(self):
        if bool(self.reset_password_token) != bool(self.reset_password_expires):
            raise ValidationError({"reset_password_token": ["Reset token and expiry must be set together"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def register(cls, name, email, password_hash, role=UserRole.USER.value):
        now = datetime.now(UTC)
        user = cls(
            name=name.strip(),
            email=normalize_email(email),
            password_hash=password_hash,
            role=role,
            created_at=now,
            updated_at=now,
        )
        user.raise_(UserRegistered(user_id=str(user.id), email=user.email, name=user.name))
        return user

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    # -------------------------------------------------------------------
    # Role management
    # -------------------------------------------------------------------
    def change_role(self, new_role):
        previous_role = self.role
        if previous_role == new_role:
            return

        self.role = new_role
        self.updated_at = datetime.now(UTC)
        self.raise_(UserRoleChanged(user_id=str(self.id), previous_role=previous_role, new_role=new_role))

    # -------------------------------------------------------------------
    # Password reset
    # -------------------------------------------------------------------
    def issue_reset_token(self, token, now=None):
        """Store ``token`` with a one-hour expiry, replacing any earlier token."""
        now = now or datetime.now(UTC)
        expires_at = now + RESET_TOKEN_TTL
        with atomic_change(self):
            self.reset_password_token = token
            self.reset_password_expires = expires_at
        self.updated_at = now
        self.raise_(PasswordResetRequested(user_id=str(self.id), expires_at=expires_at))
        return expires_at

    def reset_token_is_valid(self, token, now=None) -> bool:
        if not token or not self.reset_password_token or self.reset_password_token != token:
            return False
        if self.reset_password_expires is None:
            return False
        now = now or datetime.now(UTC)
        return _as_utc(self.reset_password_expires) > now

    def reset_password(self, token, new_password_hash, now=None):
        now = now or datetime.now(UTC)
        if not self.reset_token_is_valid(token, now):
            raise ValidationError({"token": ["Invalid or expired token"]})

        self.password_hash = new_password_hash
        with atomic_change(self):
            self.reset_password_token = None
            self.reset_password_expires = None
        self.updated_at = now
        self.raise_(PasswordChanged(user_id=str(self.id), changed_at=now))

    def summary(self) -> dict:
        return {"id": str(self.id), "name": self.name, "email": self.email}

    def profile(self) -> dict:
        return {
            **self.summary(),
            "role": self.role,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
