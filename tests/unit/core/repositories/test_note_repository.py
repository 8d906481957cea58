"""Unit tests for NoteRepository without DB."""

import pytest
from bson import ObjectId
from sqlalchemy.exc import OperationalError
from sqlalchemy.sql.expression import ColumnClause

from quirknotes.core.exceptions import InternalError
from quirknotes.core.repositories.note_repository import NoteRepository


class FakeResult:
    def __init__(self, scalar=None, scalars_list=None, rowcount=0):
        self._scalar = scalar
        self._scalars_list = scalars_list or []
        self.rowcount = rowcount

    def scalar_one_or_none(self):
        return self._scalar

    def scalars(self):
        class _It:
            def __init__(self, data):
                self._data = data

            def all(self):
                return self._data

            def __iter__(self):
                return iter(self._data)

        return _It(self._scalars_list)


class FakeSession:
    def __init__(self, results=(), commit_error=None, execute_error=None):
        self._results = list(results)
        self.commit_error = commit_error
        self.execute_error = execute_error
        self.executed = []
        self.added = []
        self.commits = 0
        self.rollbacks = 0
        self.refreshed = []

    async def execute(self, stmt):
        self.executed.append(stmt)
        if self.execute_error:
            raise self.execute_error
        return self._results.pop(0) if self._results else FakeResult()

    def add(self, obj):
        self.added.append(obj)

    async def commit(self):
        if self.commit_error:
            raise self.commit_error
        self.commits += 1

    async def rollback(self):
        self.rollbacks += 1

    async def refresh(self, obj, attrs=None):
        self.refreshed.append(obj)


class Dummy:
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


def _where_columns(stmt):
    """Column names referenced in a statement's WHERE clause."""
    return {
        child.name
        for comparison in stmt.whereclause.get_children()
        for child in comparison.get_children()
        if isinstance(child, ColumnClause)
    }


async def test_create_note():
    session = FakeSession()
    repo = NoteRepository(session)

    note = await repo.create_note({"title": "t", "content": "c", "owner_username": "alice"})

    assert session.added == [note]
    assert session.commits == 1
    assert session.refreshed == [note]


async def test_get_by_id_and_owner_filters_on_both():
    note = Dummy(id=ObjectId(), owner_username="alice")
    session = FakeSession(results=[FakeResult(note)])
    repo = NoteRepository(session)

    assert await repo.get_by_id_and_owner(note.id, "alice") is note
    assert _where_columns(session.executed[0]) == {"id", "owner_username"}


async def test_list_by_owner():
    notes = [Dummy(id=ObjectId()), Dummy(id=ObjectId())]
    session = FakeSession(results=[FakeResult(scalars_list=notes)])
    repo = NoteRepository(session)

    assert await repo.list_by_owner("alice") == notes


async def test_list_by_owner_empty():
    repo = NoteRepository(FakeSession())
    assert await repo.list_by_owner("nobody") == []


async def test_update_returns_matched_count_and_commits():
    session = FakeSession(results=[FakeResult(rowcount=1)])
    repo = NoteRepository(session)

    matched = await repo.update_by_id_and_owner(ObjectId(), "alice", {"title": "new"})

    assert matched == 1
    assert session.commits == 1
    assert _where_columns(session.executed[0]) == {"id", "owner_username"}


async def test_delete_returns_zero_when_nothing_matched():
    session = FakeSession(results=[FakeResult(rowcount=0)])
    repo = NoteRepository(session)

    assert await repo.delete_by_id_and_owner(ObjectId(), "bob") == 0
    assert _where_columns(session.executed[0]) == {"id", "owner_username"}


async def test_store_errors_become_internal_errors():
    session = FakeSession(execute_error=OperationalError("UPDATE", {}, Exception("db down")))
    repo = NoteRepository(session)

    with pytest.raises(InternalError):
        await repo.update_by_id_and_owner(ObjectId(), "alice", {"title": "x"})
    assert session.rollbacks == 1

    with pytest.raises(InternalError):
        await repo.get_by_id_and_owner(ObjectId(), "alice")
