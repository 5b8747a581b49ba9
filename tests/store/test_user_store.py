"""
Integration tests for the user document store (SQLite backed)
"""

import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from booksearch.store.books import BookValidationError

pytestmark = pytest.mark.integration


async def _create_alice(store, **overrides):
    fields = {
        "username": "alice",
        "email": "alice@example.com",
        "password": "hunter22",
        "saved_books": [],
    }
    fields.update(overrides)
    return await store.create(**fields)


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_assigns_id_and_hashes_password(self, store):
        user = await _create_alice(store)

        assert isinstance(user.id, uuid.UUID)
        assert user.password != "hunter22"
        assert user.password.startswith("$2")
        assert await user.is_correct_password("hunter22") is True
        assert await user.is_correct_password("wrong") is False

    @pytest.mark.asyncio
    async def test_create_with_books(self, store, sample_book):
        user = await _create_alice(store, saved_books=[sample_book])

        assert user.book_count == 1
        assert user.saved_books[0]["bookId"] == "zyTCAlFPjgYC"

    @pytest.mark.asyncio
    async def test_duplicate_username_raises_integrity_error(self, store):
        await _create_alice(store)

        with pytest.raises(IntegrityError):
            await _create_alice(store, email="other@example.com")

    @pytest.mark.asyncio
    async def test_duplicate_email_raises_integrity_error(self, store):
        await _create_alice(store)

        with pytest.raises(IntegrityError):
            await _create_alice(store, username="alice2")

    @pytest.mark.asyncio
    async def test_invalid_email_rejected(self, store):
        with pytest.raises(ValueError, match="valid email"):
            await _create_alice(store, email="not-an-email")

    @pytest.mark.asyncio
    async def test_invalid_book_rejected(self, store, sample_book):
        sample_book["authors"] = []

        with pytest.raises(BookValidationError):
            await _create_alice(store, saved_books=[sample_book])


class TestFindOne:
    @pytest.mark.asyncio
    async def test_find_by_each_field(self, store):
        created = await _create_alice(store)

        by_id = await store.find_one(id=created.id)
        by_username = await store.find_one(username="alice")
        by_email = await store.find_one(email="alice@example.com")

        assert by_id.id == by_username.id == by_email.id == created.id

    @pytest.mark.asyncio
    async def test_no_match_returns_none(self, store):
        assert await store.find_one(username="nobody") is None
        assert await store.find_one(id=uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_requires_a_filter(self, store):
        with pytest.raises(ValueError):
            await store.find_one()


class TestFindOneAndUpdate:
    @pytest.mark.asyncio
    async def test_add_to_set_is_idempotent_for_equal_books(self, store, sample_book):
        user = await _create_alice(store)

        await store.find_one_and_update(id=user.id, add_to_set=sample_book, run_validators=True)
        updated = await store.find_one_and_update(
            id=user.id, add_to_set=dict(sample_book), run_validators=True
        )

        assert updated.book_count == 1

    @pytest.mark.asyncio
    async def test_add_to_set_keeps_same_book_id_with_different_fields(self, store, sample_book):
        user = await _create_alice(store)
        retitled = {**sample_book, "title": "The Google Story (2nd ed.)"}

        await store.find_one_and_update(id=user.id, add_to_set=sample_book, run_validators=True)
        updated = await store.find_one_and_update(
            id=user.id, add_to_set=retitled, run_validators=True
        )

        assert updated.book_count == 2
        assert {b["title"] for b in updated.saved_books} == {
            "The Google Story",
            "The Google Story (2nd ed.)",
        }

    @pytest.mark.asyncio
    async def test_add_to_set_keeps_books_differing_only_in_whitespace(self, store, sample_book):
        user = await _create_alice(store)
        padded = {**sample_book, "title": sample_book["title"] + " "}

        await store.find_one_and_update(id=user.id, add_to_set=sample_book, run_validators=True)
        updated = await store.find_one_and_update(
            id=user.id, add_to_set=padded, run_validators=True
        )

        assert updated.book_count == 2

    @pytest.mark.asyncio
    async def test_pull_matches_book_id_exactly_as_saved(self, store, sample_book):
        user = await _create_alice(store)
        padded = {**sample_book, "bookId": " id-1 "}

        saved = await store.find_one_and_update(
            id=user.id, add_to_set=padded, run_validators=True
        )
        assert saved.saved_books[0]["bookId"] == " id-1 "

        updated = await store.find_one_and_update(id=user.id, pull={"bookId": " id-1 "})

        assert updated.book_count == 0

    @pytest.mark.asyncio
    async def test_update_is_persisted(self, store, sample_book):
        user = await _create_alice(store)
        await store.find_one_and_update(id=user.id, add_to_set=sample_book, run_validators=True)

        reloaded = await store.find_one(id=user.id)

        assert reloaded.book_count == 1
        assert reloaded.saved_books[0] == sample_book

    @pytest.mark.asyncio
    async def test_run_validators_rejects_bad_book(self, store, sample_book):
        user = await _create_alice(store)
        del sample_book["title"]

        with pytest.raises(BookValidationError):
            await store.find_one_and_update(
                id=user.id, add_to_set=sample_book, run_validators=True
            )

        reloaded = await store.find_one(id=user.id)
        assert reloaded.book_count == 0

    @pytest.mark.asyncio
    async def test_pull_removes_every_match(self, store, sample_book):
        other = {**sample_book, "bookId": "other-id", "title": "Other"}
        duplicate = {**sample_book, "title": "Same id, other title"}
        user = await _create_alice(store, saved_books=[sample_book, other, duplicate])

        updated = await store.find_one_and_update(id=user.id, pull={"bookId": "zyTCAlFPjgYC"})

        assert updated.book_count == 1
        assert updated.saved_books[0]["bookId"] == "other-id"

    @pytest.mark.asyncio
    async def test_pull_without_match_is_noop(self, store, sample_book):
        user = await _create_alice(store, saved_books=[sample_book])

        updated = await store.find_one_and_update(id=user.id, pull={"bookId": "missing"})

        assert updated.saved_books == [sample_book]

    @pytest.mark.asyncio
    async def test_unknown_user_returns_none(self, store, sample_book):
        result = await store.find_one_and_update(id=uuid.uuid4(), add_to_set=sample_book)

        assert result is None
