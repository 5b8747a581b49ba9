"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio

from booksearch.config import settings

TEST_JWT_SECRET = "test-secret-key-for-testing-only"


@pytest.fixture(autouse=True)
def auth_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use a known signing key and cheap bcrypt rounds for every test."""
    monkeypatch.setattr(settings, "jwt_secret", TEST_JWT_SECRET)
    monkeypatch.setattr(settings, "password_salt_rounds", 4)


@pytest.fixture(scope="function")
def test_database_url(tmp_path: Path) -> str:
    """Return the URL of an empty SQLite database file for this test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'booksearch_test.db'}"


@pytest_asyncio.fixture(scope="function")
async def database(test_database_url: str) -> AsyncGenerator[str, None]:
    """Point the shared engine at a fresh database with all tables created."""
    from booksearch.database.connection import close_database, create_tables, init_database

    init_database(test_database_url, force_reinit=True)
    await create_tables()

    yield test_database_url

    await close_database()


@pytest.fixture
def store(database: str) -> Any:
    """A UserStore bound to the test database."""
    _ = database
    from booksearch.store.users import UserStore

    return UserStore()


@pytest.fixture
def sample_book() -> dict[str, Any]:
    return {
        "bookId": "zyTCAlFPjgYC",
        "title": "The Google Story",
        "authors": ["David A. Vise", "Mark Malseed"],
        "description": "The definitive account of Google's rise.",
        "image": "http://books.google.com/books/content?id=zyTCAlFPjgYC",
        "link": "http://books.google.com/books?id=zyTCAlFPjgYC",
    }


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
