"""Password hashing helpers backed by bcrypt."""

from typing import Optional

import bcrypt
from asgiref.sync import sync_to_async

from app.core.common.config import settings


BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    # bcrypt only uses the first 72 bytes of its input
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def _hash(password: str, rounds: int) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def _verify(password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(_encode(password), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


async def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a plaintext password with a fresh salt.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor, defaults to ``settings.BCRYPT_ROUNDS``

    Returns:
        str: The encoded bcrypt hash
    """
    return await sync_to_async(_hash)(password, rounds or settings.BCRYPT_ROUNDS)


async def verify_password(password: str, hashed_password: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    Args:
        password: Plaintext password
        hashed_password: Hash previously produced by ``hash_password``

    Returns:
        bool: True if the password matches
    """
    return await sync_to_async(_verify)(password, hashed_password)
