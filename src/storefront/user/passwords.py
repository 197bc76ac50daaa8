"""Password hashing with passlib's bcrypt scheme.

``BCRYPT_ROUNDS`` lowers the work factor where hashing speed matters more
than strength (the test suite sets it to 4).
"""

import os

from passlib.context import CryptContext

_context = None


def _crypt_context() -> CryptContext:
    global _context
    if _context is None:
        rounds = int(os.environ.get("BCRYPT_ROUNDS", "12"))
        _context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)
    return _context


def hash_password(password: str) -> str:
    return _crypt_context().hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    if not hashed_password:
        return False
    return _crypt_context().verify(plain_password, hashed_password)
