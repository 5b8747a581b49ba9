"""
Root GraphQL mutation definitions
"""

import strawberry

from ..access_control import get_auth_context_from_info, get_store_from_info
from ..types.user import Auth, User


# Input types for mutations
@strawberry.input
class BookInput:
    """A book to save, as returned by the search provider."""

    authors: list[str]
    book_id: str
    title: str
    description: str | None = None
    image: str | None = None
    link: str | None = None


@strawberry.input
class CreateUserInput:
    """Input for registering a new user."""

    username: str
    email: str
    password: str
    saved_books: list[BookInput] | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, input: CreateUserInput) -> Auth:
        """Register a user and return a signed token for it."""
        from ..resolvers.user import create_user

        return await create_user(get_store_from_info(info), input)

    @strawberry.mutation(name="loginUser")
    async def login_user(self, info: strawberry.Info, email: str, password: str) -> Auth:
        """Exchange email and password for a signed token."""
        from ..resolvers.user import login_user

        return await login_user(get_store_from_info(info), email, password)

    @strawberry.mutation(name="saveBook")
    async def save_book(self, info: strawberry.Info, input: BookInput) -> User | None:
        """Add a book to the current user's saved books."""
        from ..resolvers.book import save_book

        return await save_book(get_auth_context_from_info(info), get_store_from_info(info), input)

    @strawberry.mutation(name="deleteBook")
    async def delete_book(self, info: strawberry.Info, book_id: str) -> User | None:
        """Remove every saved book with this id from the current user."""
        from ..resolvers.book import delete_book

        return await delete_book(
            get_auth_context_from_info(info), get_store_from_info(info), book_id
        )
