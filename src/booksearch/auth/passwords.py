"""bcrypt password hashing, run off the event loop."""

from __future__ import annotations

import asyncio

import bcrypt

from ..config import settings
from ..logging import get_logger

logger = get_logger(__name__)


async def hash_password(plain: str, rounds: int | None = None) -> str:
    """Hash a plaintext password with a fresh salt."""
    salt = bcrypt.gensalt(rounds=rounds or settings.password_salt_rounds)
    hashed = await asyncio.to_thread(bcrypt.hashpw, plain.encode("utf-8"), salt)
    return hashed.decode("utf-8")


async def check_password(plain: str, hashed: str) -> bool:
    """Compare a plaintext password against a stored bcrypt hash."""
    try:
        return await asyncio.to_thread(
            bcrypt.checkpw, plain.encode("utf-8"), hashed.encode("utf-8")
        )
    except ValueError as e:
        # A malformed stored hash can never match
        logger.warning("Stored password hash is not a bcrypt hash", error=str(e))
        return False
