"""Authentication adapters."""

from .base import AuthAdapter, AuthenticationError, Identity
from .jwt import JWTAuthAdapter

__all__ = [
    "AuthAdapter",
    "AuthenticationError",
    "Identity",
    "JWTAuthAdapter",
]
