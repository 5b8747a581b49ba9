"""Authentication for the Booksearch API."""

from .adapters.base import AuthAdapter, AuthenticationError, Identity
from .context import AuthContext
from .factory import get_auth_adapter, sign_token
from .middleware import get_auth_context

__all__ = [
    "AuthAdapter",
    "AuthContext",
    "AuthenticationError",
    "Identity",
    "get_auth_adapter",
    "get_auth_context",
    "sign_token",
]
