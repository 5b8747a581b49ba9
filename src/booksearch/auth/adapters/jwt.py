"""JWT authentication adapter for self-issued tokens."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError

from ...logging import get_logger
from .base import AuthenticationError, Identity

logger = get_logger(__name__)


class JWTAuthAdapter:
    """Signs and verifies HMAC JWTs carrying a ``data`` claim with the user's identity."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "booksearch",
        audience: str = "booksearch-api",
        token_expiry_hours: int = 2,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.audience = audience
        self.token_expiry_hours = token_expiry_hours

    def _decode(self, token: str) -> dict[str, Any]:
        return jwt.decode(
            token,
            self.secret_key,
            algorithms=[self.algorithm],
            issuer=self.issuer,
            audience=self.audience,
            options={
                "verify_exp": True,
                "verify_nbf": True,
                "verify_iat": True,
            },
        )

    async def verify_token(self, token: str) -> Identity:
        """Verify a JWT token and return the identity in its ``data`` claim."""
        try:
            payload = self._decode(token)

            data = payload.get("data")
            if not isinstance(data, dict) or not data.get("_id"):
                raise AuthenticationError("Missing identity in token")

            return Identity(
                id=UUID(str(data["_id"])),
                username=data.get("username"),
                email=data.get("email"),
            )

        except AuthenticationError:
            raise
        except InvalidTokenError as e:
            logger.warning("JWT token validation failed", error=str(e))
            raise AuthenticationError("Invalid token") from e
        except ValueError as e:
            logger.warning("JWT token carries a malformed user id", error=str(e))
            raise AuthenticationError("Invalid token") from e

    async def issue_token(self, username: str, email: str, user_id: UUID) -> str:
        """Issue a new JWT token for the given user."""
        now = datetime.now(UTC)

        payload = {
            "iss": self.issuer,
            "aud": self.audience,
            "iat": now,
            "nbf": now,
            "exp": now + timedelta(hours=self.token_expiry_hours),
            "sub": str(user_id),
            "data": {"username": username, "email": email, "_id": str(user_id)},
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
