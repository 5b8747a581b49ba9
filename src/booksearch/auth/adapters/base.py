"""Base authentication adapter interface and types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True)
class Identity:
    """Minimal reference to an authenticated caller."""

    id: UUID
    username: str | None = None
    email: str | None = None


class AuthAdapter(Protocol):
    """Token issuing and verification interface."""

    async def verify_token(self, token: str) -> Identity:
        """
        Verify a token and return the identity it was issued for.

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        ...

    async def issue_token(self, username: str, email: str, user_id: UUID) -> str:
        """Issue a signed token for the given user."""
        ...


class AuthenticationError(Exception):
    """Raised when a caller is not authenticated or its credentials are wrong.

    ``extensions`` is copied onto the GraphQL error so clients can tell this
    failure apart from any other.
    """

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)
        self.message = message
        self.extensions = {"code": "UNAUTHENTICATED"}
