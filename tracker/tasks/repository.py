"""
Task Tracker API - Task Repository

Repository pattern for task data access.
Includes MongoDB implementation for runtime and in-memory implementation for testing.
"""

from abc import abstractmethod
from typing import List

from tracker.repository import InMemoryRepository, MongoRepository, MutableRepositoryInterface
from tracker.tasks.models import Task


class TaskRepositoryInterface(MutableRepositoryInterface[Task]):
    """Abstract interface for the task store."""

    @abstractmethod
    async def list_by_creator(self, username: str) -> List[Task]:
        """List tasks whose ``created_by`` equals ``username``."""
        pass


class TaskRepository(MongoRepository[Task], TaskRepositoryInterface):
    """MongoDB implementation of the task repository."""

    COLLECTION_NAME = "tasks"
    model = Task

    async def list_by_creator(self, username: str) -> List[Task]:
        return await self._find({"created_by": username})


class InMemoryTaskRepository(InMemoryRepository[Task], TaskRepositoryInterface):
    """In-memory implementation for CI-safe testing."""

    model = Task

    async def list_by_creator(self, username: str) -> List[Task]:
        return self._find(lambda doc: doc["created_by"] == username)
