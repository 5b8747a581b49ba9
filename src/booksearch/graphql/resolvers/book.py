from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ...logging import get_logger
from ..access_control import require_identity
from ..types.user import User

if TYPE_CHECKING:
    from ...auth.context import AuthContext
    from ...store.users import UserStore
    from ..mutations.root import BookInput

logger = get_logger(__name__)


def book_document(book: BookInput) -> dict[str, Any]:
    """Convert a GraphQL book input into its stored document form."""
    return {
        "bookId": book.book_id,
        "title": book.title,
        "authors": list(book.authors),
        "description": book.description,
        "image": book.image,
        "link": book.link,
    }


async def save_book(auth: AuthContext, store: UserStore, input: BookInput) -> User | None:
    """
    Add a book to the caller's saved books.

    Duplicates are detected on full-field equality: the same ``bookId`` with a
    different title is stored as a second entry.
    """
    identity = require_identity(auth, "Could not find user")

    user = await store.find_one_and_update(
        id=identity.id,
        add_to_set=book_document(input),
        run_validators=True,
    )
    if user is None:
        logger.info("Save book for unknown user", user_id=str(identity.id))
        return None

    logger.info("Book saved", user_id=str(user.id), book_id=input.book_id)
    return User.from_model(user)


async def delete_book(auth: AuthContext, store: UserStore, book_id: str) -> User | None:
    """Remove every saved book with ``book_id`` from the caller's list."""
    identity = require_identity(auth, "Could not find user")

    user = await store.find_one_and_update(id=identity.id, pull={"bookId": book_id})
    if user is None:
        logger.info("Delete book for unknown user", user_id=str(identity.id))
        return None

    logger.info("Book removed", user_id=str(user.id), book_id=book_id)
    return User.from_model(user)
