"""
Book GraphQL type definitions
"""

from typing import Any

import strawberry


@strawberry.type
class Book:
    """A book saved to a user's reading list."""

    book_id: str
    authors: list[str]
    description: str | None
    title: str
    image: str | None
    link: str | None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Book":
        return cls(
            book_id=document["bookId"],
            authors=list(document.get("authors") or []),
            description=document.get("description"),
            title=document["title"],
            image=document.get("image"),
            link=document.get("link"),
        )
