"""Password hashing helpers built on bcrypt."""

import bcrypt

from portal.config import settings

# bcrypt only looks at the first 72 bytes of a secret.
_MAX_SECRET_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_SECRET_BYTES]


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False
