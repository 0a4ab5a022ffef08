"""Tests for SqlUserRepository against in-memory SQLite."""

import pytest

from dashboard.core.errors import DatabaseError, EmailConflictError
from dashboard.services.user_store import SqlUserRepository


@pytest.fixture
def repo(test_db):
    return SqlUserRepository(test_db)


async def test_insert_then_lookup(repo):
    user_id = await repo.insert("Grace Hopper", "grace@navy.io", "hash-1")

    by_id = await repo.get(user_id)
    by_email = await repo.get_by_email("grace@navy.io")

    assert by_id is not None
    assert by_id.id == user_id
    assert by_email.id == user_id
    assert by_id.password == "hash-1"


async def test_count_by_email(repo):
    assert await repo.count_by_email("grace@navy.io") == 0
    await repo.insert("Grace Hopper", "grace@navy.io", "hash-1")
    assert await repo.count_by_email("grace@navy.io") == 1


async def test_duplicate_email_insert_raises_conflict(repo):
    await repo.insert("Grace Hopper", "grace@navy.io", "hash-1")

    with pytest.raises(EmailConflictError):
        await repo.insert("Other Grace", "grace@navy.io", "hash-2")

    # Session is usable again after the rollback
    assert await repo.count_by_email("grace@navy.io") == 1


async def test_update_to_taken_email_raises_conflict(repo):
    await repo.insert("Grace Hopper", "grace@navy.io", "hash-1")
    ada = await repo.insert("Ada Lovelace", "ada@lovelace.io", "hash-2")

    with pytest.raises(EmailConflictError):
        await repo.update(ada, "Ada Lovelace", "grace@navy.io", None)


async def test_update_without_password_keeps_hash(repo):
    user_id = await repo.insert("Grace Hopper", "grace@navy.io", "hash-1")

    await repo.update(user_id, "Rear Admiral", "admiral@navy.io", None)

    user = await repo.get(user_id)
    assert (user.name, user.email, user.password) == (
        "Rear Admiral", "admiral@navy.io", "hash-1",
    )


async def test_update_with_password_replaces_hash(repo):
    user_id = await repo.insert("Grace Hopper", "grace@navy.io", "hash-1")

    await repo.update(user_id, "Grace Hopper", "grace@navy.io", "hash-2")

    assert (await repo.get(user_id)).password == "hash-2"


async def test_delete_unknown_id_is_noop(repo):
    await repo.insert("Grace Hopper", "grace@navy.io", "hash-1")

    await repo.delete("missing")

    assert len(await repo.list_all()) == 1


async def test_delete_removes_row(repo):
    user_id = await repo.insert("Grace Hopper", "grace@navy.io", "hash-1")

    await repo.delete(user_id)

    assert await repo.get(user_id) is None


async def test_list_all_orders_by_name(repo):
    await repo.insert("Grace Hopper", "grace@navy.io", "h")
    await repo.insert("Ada Lovelace", "ada@lovelace.io", "h")

    names = [u.name for u in await repo.list_all()]

    assert names == ["Ada Lovelace", "Grace Hopper"]


async def test_store_failure_maps_to_database_error(repo, test_engine):
    async with test_engine.begin() as conn:
        await conn.exec_driver_sql("DROP TABLE users")

    with pytest.raises(DatabaseError) as exc_info:
        await repo.count_by_email("grace@navy.io")

    assert exc_info.value.code == "DATABASE_ERROR"
    assert exc_info.value.http_status == 503
