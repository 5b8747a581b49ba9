"""
Root GraphQL query definitions
"""

import strawberry

from ..access_control import get_auth_context_from_info, get_store_from_info
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def user(self, info: strawberry.Info, username: str) -> User | None:
        """Get a user by username."""
        from ..resolvers.user import resolve_user_by_username

        return await resolve_user_by_username(get_store_from_info(info), username)

    @strawberry.field
    async def me(self, info: strawberry.Info) -> User | None:
        """Get the current authenticated user."""
        from ..resolvers.user import resolve_current_user

        return await resolve_current_user(
            get_auth_context_from_info(info), get_store_from_info(info)
        )
