"""Embedded book records stored inside a user's ``saved_books`` list."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

BOOK_FIELDS = ("bookId", "title", "authors", "description", "image", "link")


class BookValidationError(ValueError):
    """Raised when a book record fails validation on write."""


class BookRecord(BaseModel):
    """Shape of a saved book as it lives in the user document."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    book_id: str = Field(alias="bookId")
    title: str
    authors: list[str] = Field(min_length=1)
    description: str | None = None
    image: str | None = None
    link: str | None = None

    @field_validator("book_id", "title")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        # Stored as sent; dedup and pull compare the exact client value
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


def validate_book(data: dict[str, Any] | BookRecord) -> dict[str, Any]:
    """Validate a book and return its document form.

    Raises:
        BookValidationError: If required fields are missing or malformed
    """
    if isinstance(data, BookRecord):
        return data.to_document()
    try:
        return BookRecord.model_validate(data).to_document()
    except ValidationError as e:
        raise BookValidationError(f"Invalid book: {e}") from e


def as_document(data: dict[str, Any]) -> dict[str, Any]:
    """Cast a book to document form without running validators."""
    document = {field: data.get(field) for field in BOOK_FIELDS}
    if document["authors"] is not None:
        document["authors"] = list(document["authors"])
    return document


def matches(book: dict[str, Any], criteria: dict[str, Any]) -> bool:
    """True if every field in ``criteria`` equals the book's value."""
    return all(book.get(key) == value for key, value in criteria.items())
