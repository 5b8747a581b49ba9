"""Factory for the configured token adapter."""

from __future__ import annotations

from uuid import UUID

from ..config import settings
from .adapters.base import AuthAdapter
from .adapters.jwt import JWTAuthAdapter


def get_auth_adapter() -> AuthAdapter:
    """Create and return the JWT adapter described by the settings."""
    if not settings.jwt_secret:
        raise ValueError("JWT secret key is required. Set BOOKSEARCH_JWT_SECRET.")

    return JWTAuthAdapter(
        secret_key=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        token_expiry_hours=settings.token_expiry_hours,
    )


async def sign_token(username: str, email: str, user_id: UUID) -> str:
    """Sign a token for ``(username, email, id)`` with the configured adapter."""
    return await get_auth_adapter().issue_token(username, email, user_id)
