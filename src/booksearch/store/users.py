"""
Document-style access to user records.

``UserStore`` offers the three primitives the resolvers need: lookup by a
single field, creation, and an atomic find-and-update that applies
``add_to_set`` / ``pull`` operators to the embedded ``saved_books`` list.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from uuid import UUID

from sqlalchemy import select

from ..auth.passwords import hash_password
from ..database.connection import get_async_session
from ..dbmodels import Users
from ..logging import get_logger
from .books import as_document, matches, validate_book

logger = get_logger(__name__)


class UserStore:
    """Persistence facade over the ``users`` table."""

    async def find_one(
        self,
        *,
        id: UUID | None = None,
        username: str | None = None,
        email: str | None = None,
    ) -> Users | None:
        """Return the single user matching every given field, or None."""
        conditions = []
        if id is not None:
            conditions.append(Users.id == id)
        if username is not None:
            conditions.append(Users.username == username)
        if email is not None:
            conditions.append(Users.email == email)
        if not conditions:
            raise ValueError("find_one requires at least one filter")

        async with get_async_session() as session:
            result = await session.execute(select(Users).where(*conditions))
            return result.scalar_one_or_none()

    async def create(
        self,
        *,
        username: str,
        email: str,
        password: str,
        saved_books: Iterable[dict[str, Any]] = (),
    ) -> Users:
        """
        Insert a new user.

        The password is hashed and every book validated before the insert.
        Uniqueness violations surface as ``sqlalchemy.exc.IntegrityError``.
        """
        books = [validate_book(book) for book in saved_books]
        user = Users(
            username=username,
            email=email,
            password=await hash_password(password),
            saved_books=books,
        )

        async with get_async_session() as session:
            session.add(user)
            await session.flush()

        logger.debug("User row inserted", user_id=str(user.id))
        return user

    async def find_one_and_update(
        self,
        *,
        id: UUID,
        add_to_set: dict[str, Any] | None = None,
        pull: dict[str, Any] | None = None,
        run_validators: bool = False,
    ) -> Users | None:
        """
        Atomically mutate one user's ``saved_books`` and return the new state.

        Args:
            id: User to update
            add_to_set: Book appended unless a fully equal entry already exists
            pull: Field subset; every entry matching it is removed
            run_validators: Validate ``add_to_set`` against the book schema

        Returns:
            The post-update user, or None when no user has this id
        """
        async with get_async_session() as session:
            stmt = select(Users).where(Users.id == id).with_for_update()
            user = (await session.execute(stmt)).scalar_one_or_none()
            if user is None:
                return None

            books = list(user.saved_books or [])

            if add_to_set is not None:
                book = validate_book(add_to_set) if run_validators else as_document(add_to_set)
                if book not in books:
                    books.append(book)

            if pull is not None:
                books = [book for book in books if not matches(book, pull)]

            if books != user.saved_books:
                user.saved_books = books

        return user
