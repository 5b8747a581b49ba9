"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING

import strawberry

from .book import Book

if TYPE_CHECKING:
    from ...dbmodels import Users


@strawberry.type
class User:
    """User type for GraphQL API. The password hash is never exposed."""

    id: strawberry.ID = strawberry.field(name="_id")
    username: str
    email: str
    saved_books: list[Book]

    @strawberry.field
    def book_count(self) -> int:
        """Number of saved books, computed at read time."""
        return len(self.saved_books)

    @classmethod
    def from_model(cls, user: "Users") -> "User":
        return cls(
            id=strawberry.ID(str(user.id)),
            username=user.username,
            email=user.email,
            saved_books=[Book.from_document(doc) for doc in user.saved_books or []],
        )


@strawberry.type
class Auth:
    """Signed token together with the user it was issued for."""

    token: str
    user: User
