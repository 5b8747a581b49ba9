"""
Database models for Booksearch (authoritative ORM definitions).

Saved books are embedded in the user row as a JSON list; they have no table
or identity of their own.
"""

import re
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import (
    JSON,
    DateTime,
    MetaData,
    PrimaryKeyConstraint,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, validates

from ..auth.passwords import check_password

# Naming convention for deterministic constraint/index names
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

EMAIL_PATTERN = re.compile(r".+@.+\..+")

DocumentList = JSON().with_variant(JSONB(), "postgresql")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="users_pkey"),
        UniqueConstraint("username", name="users_username_key"),
        UniqueConstraint("email", name="users_email_key"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    # bcrypt hash; the store hashes before insert
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    saved_books: Mapped[list[dict[str, Any]]] = mapped_column(
        DocumentList, nullable=False, default=list
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(True), default=_utcnow, onupdate=_utcnow
    )

    @validates("username")
    def _validate_username(self, key: str, value: str) -> str:
        value = (value or "").strip()
        if not value:
            raise ValueError("Username is required")
        return value

    @validates("email")
    def _validate_email(self, key: str, value: str) -> str:
        if not value or not EMAIL_PATTERN.fullmatch(value):
            raise ValueError("Must use a valid email address")
        return value

    @property
    def book_count(self) -> int:
        return len(self.saved_books or [])

    async def is_correct_password(self, password: str) -> bool:
        return await check_password(password, self.password)

    def __repr__(self) -> str:
        return f"<Users id={self.id} username={self.username!r}>"
