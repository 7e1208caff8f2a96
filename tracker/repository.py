"""
Task Tracker API - Repository Base Classes

Shared store contract for resources that go through the mutation protocol.
Includes MongoDB implementation for runtime and in-memory implementation
for testing. Entities are stored as documents keyed by an integer ``_id`` and
carry a ``version`` concurrency token that the store bumps on every replace.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, TypeVar

from motor.motor_asyncio import AsyncIOMotorDatabase

from tracker.database import next_sequence

T = TypeVar("T")


class MutableRepositoryInterface(ABC, Generic[T]):
    """
    Abstract interface for a resource store.

    Enables swapping implementations (MongoDB for runtime, in-memory for tests).
    """

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Insert ``entity``, assigning its id and initial version."""
        pass

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[T]:
        pass

    @abstractmethod
    async def list_all(self) -> List[T]:
        pass

    @abstractmethod
    async def exists(self, entity_id: int) -> bool:
        pass

    @abstractmethod
    async def replace(self, entity: T, expected_version: Optional[int] = None) -> bool:
        """
        Overwrite the stored record with ``entity``.

        Returns False when no record matched: either the id is absent or
        ``expected_version`` is no longer current.
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        pass


class MongoRepository(MutableRepositoryInterface[T]):
    """MongoDB implementation of the resource store."""

    COLLECTION_NAME: str = ""
    model: type

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def create(self, entity: T) -> T:
        entity.id = await next_sequence(self.db, self.COLLECTION_NAME)
        entity.version = 1
        await self.collection.insert_one(entity.to_dict())
        return entity

    async def get_by_id(self, entity_id: int) -> Optional[T]:
        doc = await self.collection.find_one({"_id": entity_id})
        if doc is None:
            return None
        return self.model.from_dict(doc)

    async def list_all(self) -> List[T]:
        return await self._find({})

    async def exists(self, entity_id: int) -> bool:
        return await self.collection.count_documents({"_id": entity_id}, limit=1) > 0

    async def replace(self, entity: T, expected_version: Optional[int] = None) -> bool:
        query: dict = {"_id": entity.id}
        if expected_version is not None:
            query["version"] = expected_version
        result = await self.collection.update_one(
            query,
            {"$set": entity.replacement_fields(), "$inc": {"version": 1}},
        )
        return result.matched_count > 0

    async def delete(self, entity_id: int) -> bool:
        result = await self.collection.delete_one({"_id": entity_id})
        return result.deleted_count > 0

    async def _find(self, query: dict) -> List[T]:
        cursor = self.collection.find(query).sort("_id", 1)
        items: List[T] = []
        async for doc in cursor:
            items.append(self.model.from_dict(doc))
        return items


class InMemoryRepository(MutableRepositoryInterface[T]):
    """
    In-memory implementation for CI-safe testing.

    Stores document copies so callers never alias stored state.
    """

    model: type

    def __init__(self):
        self._docs: dict[int, dict] = {}
        self._next_id = 1

    def clear(self) -> None:
        self._docs.clear()
        self._next_id = 1

    def _check_unique(self, doc: dict) -> None:
        """Hook for subclasses emulating unique indexes."""

    async def create(self, entity: T) -> T:
        entity.id = self._next_id
        entity.version = 1
        doc = entity.to_dict()
        self._check_unique(doc)
        self._next_id += 1
        self._docs[entity.id] = doc
        return entity

    async def get_by_id(self, entity_id: int) -> Optional[T]:
        doc = self._docs.get(entity_id)
        if doc is None:
            return None
        return self.model.from_dict(dict(doc))

    async def list_all(self) -> List[T]:
        return self._find(lambda doc: True)

    async def exists(self, entity_id: int) -> bool:
        return entity_id in self._docs

    async def replace(self, entity: T, expected_version: Optional[int] = None) -> bool:
        current = self._docs.get(entity.id)
        if current is None:
            return False
        if expected_version is not None and current["version"] != expected_version:
            return False
        updated = {**current, **entity.replacement_fields(), "version": current["version"] + 1}
        self._check_unique(updated)
        self._docs[entity.id] = updated
        return True

    async def delete(self, entity_id: int) -> bool:
        return self._docs.pop(entity_id, None) is not None

    def _find(self, predicate: Callable[[dict], bool]) -> List[T]:
        return [
            self.model.from_dict(dict(doc))
            for _, doc in sorted(self._docs.items())
            if predicate(doc)
        ]
