"""Resolve the caller's identity from request credentials."""

from __future__ import annotations

from ..logging import get_logger
from .adapters.base import AuthenticationError
from .context import AuthContext
from .factory import get_auth_adapter

logger = get_logger(__name__)


def extract_token(authorization: str | None = None, token: str | None = None) -> str | None:
    """
    Pick the raw token out of the request.

    An explicit ``token`` parameter wins over the Authorization header. For
    the header only the last whitespace-separated segment is used, so both
    ``Bearer <token>`` and a bare token are accepted.
    """
    if token:
        return token.strip() or None
    if authorization:
        parts = authorization.split()
        return parts[-1] if parts else None
    return None


async def get_auth_context(
    authorization: str | None = None,
    token: str | None = None,
) -> AuthContext:
    """
    Build the AuthContext for a request.

    Never fails the request: a missing, expired or tampered token yields an
    unauthenticated context and resolvers decide whether that is acceptable.

    Args:
        authorization: Authorization header value
        token: Token passed as a request parameter

    Returns:
        AuthContext with the verified identity, or an anonymous one
    """
    raw_token = extract_token(authorization, token)
    if not raw_token:
        return AuthContext.anonymous()

    adapter = get_auth_adapter()
    try:
        identity = await adapter.verify_token(raw_token)
    except AuthenticationError as e:
        logger.warning("Invalid token, continuing unauthenticated", error=str(e))
        return AuthContext.anonymous()

    logger.debug("Request authenticated", user_id=str(identity.id))
    return AuthContext(user=identity, token=raw_token)
