"""Tests for the bcrypt password helpers."""

import pytest

from app.core.common.password import hash_password, verify_password


@pytest.mark.asyncio
async def test_hash_then_verify():
    hashed = await hash_password("secret123")

    assert hashed != "secret123"
    assert await verify_password("secret123", hashed) is True
    assert await verify_password("secret124", hashed) is False


@pytest.mark.asyncio
async def test_hashes_are_salted():
    assert await hash_password("secret123") != await hash_password("secret123")


@pytest.mark.asyncio
async def test_explicit_rounds():
    hashed = await hash_password("secret123", rounds=5)

    assert hashed.split("$")[2] == "05"


@pytest.mark.asyncio
async def test_verify_against_malformed_hash():
    assert await verify_password("secret123", "not-a-bcrypt-hash") is False


@pytest.mark.asyncio
async def test_password_longer_than_72_bytes():
    password = "😀" * 32
    hashed = await hash_password(password)

    assert len(password.encode("utf-8")) == 128
    assert await verify_password(password, hashed) is True
    assert await verify_password("😀" * 31 + "😁", hashed) is True
    assert await verify_password("😁" * 32, hashed) is False
