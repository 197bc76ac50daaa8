"""Session tokens and the per-request principal.

Tokens are HS256 JWTs whose ``sub`` is the user id. Every authenticated
request reloads the user, so a role change or a deleted account takes effect
on the next request rather than when the token expires.
"""

import os
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from protean.utils.globals import current_domain

from storefront.user.user import User, UserRole

ALGORITHM = "HS256"
DEFAULT_TOKEN_LIFETIME_MINUTES = 60 * 24

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)


def _secret_key() -> str:
    return os.getenv("SECRET_KEY", "dev-secret-key")


def _token_lifetime() -> timedelta:
    return timedelta(minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", DEFAULT_TOKEN_LIFETIME_MINUTES)))


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(UTC) + (expires_delta or _token_lifetime())
    return jwt.encode({"sub": str(user_id), "exp": expire}, _secret_key(), algorithm=ALGORITHM)


def decode_access_token(token: str) -> str | None:
    """Return the user id carried by ``token``, or None if it is invalid or expired."""
    try:
        payload = jwt.decode(token, _secret_key(), algorithms=[ALGORITHM])
    except JWTError:
        return None
    return payload.get("sub")


@dataclass(frozen=True)
class Principal:
    user_id: str
    role: str
    name: str
    email: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        return cls(user_id=str(user.id), role=user.role, name=user.name, email=user.email)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_principal(token: str | None = Depends(oauth2_scheme)) -> Principal:
    if not token:
        raise _unauthorized("Not authenticated")

    user_id = decode_access_token(token)
    if user_id is None:
        raise _unauthorized("Could not validate credentials")

    user = current_domain.repository_for(User).find(user_id)
    if user is None:
        raise _unauthorized("Could not validate credentials")

    return Principal.from_user(user)


async def require_admin(principal: Principal = Depends(get_current_principal)) -> Principal:
    # Non-admin callers get 401, not 403
    if not principal.is_admin:
        raise _unauthorized("Admin access required")
    return principal
