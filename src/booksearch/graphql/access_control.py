"""
Shared request-context helpers for GraphQL resolvers
"""

from typing import TYPE_CHECKING

import strawberry

from ..auth.adapters.base import AuthenticationError, Identity
from ..auth.context import AuthContext
from ..logging import get_logger

if TYPE_CHECKING:
    from ..store.users import UserStore

logger = get_logger(__name__)


def get_auth_context_from_info(info: strawberry.Info) -> AuthContext:
    """
    Extract the auth context resolved for this request.

    Falls back to an anonymous context when the context getter did not
    provide one.
    """
    auth = info.context.get("auth")
    if auth is None:
        logger.error("Auth context not found in GraphQL context")
        return AuthContext.anonymous()
    return auth


def get_store_from_info(info: strawberry.Info) -> "UserStore":
    store = info.context.get("store")
    if store is None:
        from ..store.users import UserStore

        store = UserStore()
    return store


def require_identity(auth: AuthContext, message: str) -> Identity:
    """Return the caller's identity or raise AuthenticationError with ``message``."""
    if auth.user is None:
        raise AuthenticationError(message)
    return auth.user
