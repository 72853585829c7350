"""SQL Entry Repository — insert, ordering, lookup and deletes against SQLite.

Invariants verified:
    - insert assigns increasing ids and a created_at timestamp
    - list_newest_first returns reverse insertion order
    - delete of an unknown id reports 0 changes without raising
    - ids beyond the 64-bit column range read as missing
    - ids are not reused after deletion
    - SQLAlchemy failures surface as DatabaseError
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from diary.core.errors import DatabaseError
from diary.infrastructure.entry_repository import SqlEntryRepository
from diary.models.entry import Entry


async def _insert(repo, text):
    return await repo.insert(
        content=text, greentext=f">{text}", name="Anonymous", sub="",
    )


async def test_insert_assigns_id_and_timestamp(test_db):
    repo = SqlEntryRepository(test_db)
    entry = await _insert(repo, "hello")
    assert entry.id >= 1
    assert entry.content == "hello"
    assert entry.greentext == ">hello"
    assert isinstance(entry.created_at, datetime)


async def test_ids_increase_monotonically(test_db):
    repo = SqlEntryRepository(test_db)
    ids = [(await _insert(repo, f"e{i}")).id for i in range(4)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 4


async def test_list_returns_reverse_insertion_order(test_db):
    repo = SqlEntryRepository(test_db)
    inserted = [await _insert(repo, f"e{i}") for i in range(5)]
    listed = await repo.list_newest_first()
    assert [e.id for e in listed] == [e.id for e in reversed(inserted)]


async def test_list_orders_by_created_at_not_id(test_db):
    now = datetime.now(timezone.utc)
    older = Entry(
        content="old", greentext=">old", name="a", sub="",
        created_at=now - timedelta(days=1),
    )
    newer = Entry(content="new", greentext=">new", name="a", sub="", created_at=now)
    # insert the newer one first so id order disagrees with time order
    test_db.add(newer)
    await test_db.commit()
    test_db.add(older)
    await test_db.commit()

    listed = await SqlEntryRepository(test_db).list_newest_first()
    assert [e.content for e in listed] == ["new", "old"]


async def test_list_empty(test_db):
    assert await SqlEntryRepository(test_db).list_newest_first() == []


async def test_get_existing_and_missing(test_db):
    repo = SqlEntryRepository(test_db)
    entry = await _insert(repo, "find me")
    found = await repo.get(entry.id)
    assert found is not None
    assert found.content == "find me"
    assert await repo.get(entry.id + 100) is None


async def test_delete_existing_reports_one_change(test_db):
    repo = SqlEntryRepository(test_db)
    entry = await _insert(repo, "bye")
    assert await repo.delete(entry.id) == 1
    assert await repo.get(entry.id) is None


async def test_delete_missing_reports_zero_changes(test_db):
    assert await SqlEntryRepository(test_db).delete(9999) == 0


async def test_delete_all_counts_rows(test_db):
    repo = SqlEntryRepository(test_db)
    for i in range(3):
        await _insert(repo, f"e{i}")
    assert await repo.delete_all() == 3
    assert await repo.list_newest_first() == []


async def test_ids_not_reused_after_delete(test_db):
    repo = SqlEntryRepository(test_db)
    first = await _insert(repo, "one")
    second = await _insert(repo, "two")
    await repo.delete(second.id)
    third = await _insert(repo, "three")
    assert third.id > second.id > first.id


async def test_ids_not_reused_after_delete_all(test_db):
    repo = SqlEntryRepository(test_db)
    last = await _insert(repo, "one")
    await repo.delete_all()
    fresh = await _insert(repo, "two")
    assert fresh.id > last.id


async def test_sqlalchemy_error_becomes_database_error(test_db, monkeypatch):
    async def broken_commit():
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(test_db, "commit", broken_commit)
    repo = SqlEntryRepository(test_db)
    with pytest.raises(DatabaseError) as exc_info:
        await _insert(repo, "doomed")
    assert exc_info.value.http_status == 500
    assert exc_info.value.operation == "insert"


async def test_out_of_range_ids_are_missing(test_db):
    repo = SqlEntryRepository(test_db)
    await _insert(repo, "stays")
    huge = 99999999999999999999
    assert await repo.get(huge) is None
    assert await repo.delete(huge) == 0
    assert await repo.delete(-huge) == 0
    assert len(await repo.list_newest_first()) == 1
