from __future__ import annotations

from typing import TYPE_CHECKING

from ...auth.adapters.base import AuthenticationError
from ...auth.factory import get_auth_adapter, sign_token
from ...logging import get_logger
from ..access_control import require_identity
from ..types.user import Auth, User
from .book import book_document

if TYPE_CHECKING:
    from ...auth.context import AuthContext
    from ...store.users import UserStore
    from ..mutations.root import CreateUserInput

logger = get_logger(__name__)


# Query resolvers
async def resolve_user_by_username(store: UserStore, username: str) -> User | None:
    """Look a user up by exact username. A miss is None, not an error."""
    user = await store.find_one(username=username)
    if user is None:
        return None
    return User.from_model(user)


async def resolve_current_user(auth: AuthContext, store: UserStore) -> User | None:
    """
    Resolve the authenticated caller.

    Raises before any store access when the request is unauthenticated. A
    verified identity whose user no longer exists resolves to None.
    """
    identity = require_identity(auth, "Not Authenticated")

    user = await store.find_one(id=identity.id)
    if user is None:
        logger.info("Authenticated identity has no user", user_id=str(identity.id))
        return None
    return User.from_model(user)


# Mutation resolvers
async def create_user(store: UserStore, input: CreateUserInput) -> Auth:
    """
    Register a new user and sign a token for it.

    Username and email uniqueness is enforced by the store; a collision
    propagates as the store's own error. The signing adapter is resolved
    before the insert so a signing misconfiguration leaves no row behind.
    """
    adapter = get_auth_adapter()

    user = await store.create(
        username=input.username,
        email=input.email,
        password=input.password,
        saved_books=[book_document(book) for book in input.saved_books or []],
    )
    token = await adapter.issue_token(user.username, user.email, user.id)

    logger.info("User created", user_id=str(user.id), username=user.username)
    return Auth(token=token, user=User.from_model(user))


async def login_user(store: UserStore, email: str, password: str) -> Auth:
    """Verify email and password and sign a fresh token."""
    user = await store.find_one(email=email)
    if user is None:
        logger.info("Login for unknown email")
        raise AuthenticationError("Not authenticated")

    if not await user.is_correct_password(password):
        logger.info("Login with wrong password", user_id=str(user.id))
        raise AuthenticationError("Not authenticated")

    token = await sign_token(user.username, user.email, user.id)

    logger.info("User logged in", user_id=str(user.id))
    return Auth(token=token, user=User.from_model(user))
