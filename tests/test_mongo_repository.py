"""
Task Tracker API - MongoDB Repository Tests

Checks the queries sent to Motor collections, using mocks instead of a server.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo import ASCENDING, ReturnDocument

from tracker.database import COUNTERS_COLLECTION, database, next_sequence
from tracker.tasks.models import Task
from tracker.tasks.repository import TaskRepository
from tracker.users.repository import MongoUserRepository


def _collection() -> MagicMock:
    collection = MagicMock()
    for method in (
        "insert_one",
        "find_one",
        "find_one_and_update",
        "update_one",
        "delete_one",
        "count_documents",
        "create_index",
    ):
        setattr(collection, method, AsyncMock())
    return collection


@pytest.fixture
def collections():
    return {}


@pytest.fixture
def mock_db(collections):
    db = MagicMock()
    db.__getitem__.side_effect = lambda name: collections.setdefault(name, _collection())
    return db


def _task(task_id=3) -> Task:
    return Task(id=task_id, title="T2", created_by="alice", created_at=None)


class TestConditionalReplace:

    def test_replace_filters_on_id_and_version(self, mock_db, collections):
        repository = TaskRepository(mock_db)
        collections["tasks"].update_one.return_value = MagicMock(matched_count=1)
        task = _task()

        assert asyncio.run(repository.replace(task, expected_version=2)) is True

        query, update = collections["tasks"].update_one.await_args.args
        assert query == {"_id": 3, "version": 2}
        assert update == {"$set": task.replacement_fields(), "$inc": {"version": 1}}
        assert "_id" not in update["$set"]
        assert "version" not in update["$set"]

    def test_replace_without_version_filters_on_id_only(self, mock_db, collections):
        repository = TaskRepository(mock_db)
        collections["tasks"].update_one.return_value = MagicMock(matched_count=1)

        asyncio.run(repository.replace(_task()))

        query, update = collections["tasks"].update_one.await_args.args
        assert query == {"_id": 3}
        assert update["$inc"] == {"version": 1}

    def test_replace_reports_no_match(self, mock_db, collections):
        repository = TaskRepository(mock_db)
        collections["tasks"].update_one.return_value = MagicMock(matched_count=0)

        assert asyncio.run(repository.replace(_task(), expected_version=1)) is False

    def test_replace_without_created_at_keeps_stored_value(self, mock_db, collections):
        repository = TaskRepository(mock_db)
        collections["tasks"].update_one.return_value = MagicMock(matched_count=1)

        asyncio.run(repository.replace(_task()))

        _, update = collections["tasks"].update_one.await_args.args
        assert "created_at" not in update["$set"]


class TestSequenceAndCreate:

    def test_next_sequence_increments_counter(self, mock_db):
        counters = mock_db[COUNTERS_COLLECTION]
        counters.find_one_and_update.return_value = {"_id": "tasks", "seq": 7}

        assert asyncio.run(next_sequence(mock_db, "tasks")) == 7
        counters.find_one_and_update.assert_awaited_once_with(
            {"_id": "tasks"},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )

    def test_create_inserts_with_sequence_id_and_first_version(self, mock_db, collections):
        repository = TaskRepository(mock_db)
        mock_db[COUNTERS_COLLECTION].find_one_and_update.return_value = {"_id": "tasks", "seq": 5}

        created = asyncio.run(repository.create(_task(task_id=None)))

        assert created.id == 5
        assert created.version == 1
        inserted = collections["tasks"].insert_one.await_args.args[0]
        assert inserted["_id"] == 5
        assert inserted["version"] == 1


class TestUserQueries:

    def test_username_lookup_is_exact(self, mock_db, collections):
        repository = MongoUserRepository(mock_db)
        collections["users"].find_one.return_value = None

        assert asyncio.run(repository.get_by_username("Alice")) is None
        collections["users"].find_one.assert_awaited_once_with({"username": "Alice"})


class TestEnsureIndexes:

    def test_unique_username_index(self, mock_db, collections, monkeypatch):
        monkeypatch.setattr(database, "db", mock_db)

        asyncio.run(database.ensure_indexes())

        collections["users"].create_index.assert_awaited_once_with(
            [("username", ASCENDING)], unique=True
        )
        collections["tasks"].create_index.assert_awaited_once_with([("created_by", ASCENDING)])

    def test_requires_connection(self, monkeypatch):
        monkeypatch.setattr(database, "db", None)
        with pytest.raises(RuntimeError, match="not connected"):
            asyncio.run(database.ensure_indexes())
