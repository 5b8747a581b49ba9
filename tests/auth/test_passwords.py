"""Unit tests for bcrypt password helpers."""

import pytest

from booksearch.auth.passwords import check_password, hash_password


@pytest.mark.asyncio
async def test_hash_is_not_plaintext_and_salted():
    first = await hash_password("correct horse")
    second = await hash_password("correct horse")

    assert first != "correct horse"
    assert first != second


@pytest.mark.asyncio
async def test_check_password():
    hashed = await hash_password("correct horse")

    assert await check_password("correct horse", hashed) is True
    assert await check_password("battery staple", hashed) is False


@pytest.mark.asyncio
async def test_rounds_come_from_settings():
    hashed = await hash_password("pw")

    # bcrypt encodes the cost as $2b$NN$
    assert hashed.split("$")[2] == "04"


@pytest.mark.asyncio
async def test_malformed_hash_never_matches():
    assert await check_password("pw", "plaintext-not-a-hash") is False
