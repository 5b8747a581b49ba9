"""Authentication context for request handling."""

from __future__ import annotations

from dataclasses import dataclass

from .adapters.base import Identity


@dataclass
class AuthContext:
    """Runtime authentication context for a request."""

    user: Identity | None
    token: str | None = None

    @classmethod
    def anonymous(cls) -> AuthContext:
        return cls(user=None, token=None)

    @property
    def is_authenticated(self) -> bool:
        """Check if the request carries a verified identity."""
        return self.user is not None
