"""Tests for UserRepository on an in-memory SQLite database."""

import pytest

from app.core.user import UserRepository


@pytest.fixture
def repository(database):
    session = database.new_session()
    yield UserRepository(session)
    session.close()


@pytest.mark.asyncio
async def test_create_and_get_user(repository):
    user = await repository.create_user("Citra", "citra@example.com", "hash")

    assert user.id is not None
    fetched = await repository.get_user(user.id)
    assert fetched.email == "citra@example.com"
    assert fetched.hashed_password == "hash"


@pytest.mark.asyncio
async def test_get_users_ordered_by_id(repository):
    first = await repository.create_user("A", "a@example.com", "hash")
    second = await repository.create_user("B", "b@example.com", "hash")

    users = await repository.get_users()

    assert [user.id for user in users] == [first.id, second.id]


@pytest.mark.asyncio
async def test_check_user_by_email(repository):
    await repository.create_user("Citra", "citra@example.com", "hash")

    assert await repository.check_user_by_email("citra@example.com") is True
    assert await repository.check_user_by_email("other@example.com") is False


@pytest.mark.asyncio
async def test_update_user(repository):
    user = await repository.create_user("Citra", "citra@example.com", "hash")

    updated = await repository.update_user(user.id, "Citra D.", "citra.d@example.com")

    assert updated.name == "Citra D."
    assert await repository.check_user_by_email("citra.d@example.com") is True


@pytest.mark.asyncio
async def test_update_missing_user(repository):
    assert await repository.update_user(99, "Nobody", "nobody@example.com") is None


@pytest.mark.asyncio
async def test_update_password(repository):
    user = await repository.create_user("Citra", "citra@example.com", "hash")

    assert await repository.update_password(user.id, "new-hash") is True
    assert (await repository.get_user(user.id)).hashed_password == "new-hash"
    assert await repository.update_password(99, "new-hash") is False


@pytest.mark.asyncio
async def test_delete_user(repository):
    user = await repository.create_user("Citra", "citra@example.com", "hash")

    assert await repository.delete_user(user.id) is True
    assert await repository.get_user(user.id) is None
    assert await repository.delete_user(user.id) is False
