"""
Task Tracker API - Task Service

Business logic for task operations.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from tracker.mutation import MutationResult, ResourceMutator
from tracker.tasks.models import Task
from tracker.tasks.repository import TaskRepositoryInterface
from tracker.tasks.schemas import TaskCreateRequest, TaskResponse, TaskUpdateRequest

logger = logging.getLogger(__name__)


class TaskService:
    """Service layer for task business logic."""

    def __init__(
        self,
        repository: TaskRepositoryInterface,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the task service.

        Args:
            repository: Task repository implementation
            clock: Optional clock function for testing (returns current datetime)
        """
        self.repository = repository
        self.mutator = ResourceMutator(repository, "Task", clock=clock)

    @staticmethod
    def _task_to_response(task: Task) -> TaskResponse:
        return TaskResponse(
            id=task.id,
            title=task.title,
            description=task.description,
            created_by=task.created_by,
            status=task.status,
            priority=task.priority,
            progress=task.progress,
            due_date=task.due_date,
            created_at=task.created_at,
            version=task.version,
        )

    async def create_task(self, request: TaskCreateRequest) -> TaskResponse:
        task = Task(
            id=request.id,
            title=request.title,
            created_by=request.created_by,
            status=request.status,
            priority=request.priority,
            description=request.description,
            progress=request.progress,
            due_date=request.due_date,
        )
        created = await self.mutator.create(task)
        return self._task_to_response(created)

    async def list_tasks(self) -> List[TaskResponse]:
        tasks = await self.repository.list_all()
        logger.info("Fetched %d tasks from the database.", len(tasks))
        return [self._task_to_response(task) for task in tasks]

    async def list_tasks_by_username(self, username: str) -> List[TaskResponse]:
        tasks = await self.repository.list_by_creator(username)
        if tasks:
            logger.info("%d tasks found for user: %s.", len(tasks), username)
        else:
            logger.warning("No tasks found for user: %s.", username)
        return [self._task_to_response(task) for task in tasks]

    async def get_task(self, task_id: int) -> Optional[TaskResponse]:
        task = await self.repository.get_by_id(task_id)
        if task is None:
            logger.warning("Task with ID %s not found.", task_id)
            return None
        return self._task_to_response(task)

    async def update_task(self, task_id: int, request: TaskUpdateRequest) -> MutationResult:
        """Replace a task in full. Raises ConcurrencyConflictError on a stale version."""
        task = Task(
            id=request.id,
            title=request.title,
            created_by=request.created_by,
            status=request.status,
            priority=request.priority,
            description=request.description,
            progress=request.progress,
            due_date=request.due_date,
            created_at=request.created_at,
        )
        return await self.mutator.update(task_id, task, expected_version=request.version)

    async def delete_task(self, task_id: int) -> MutationResult:
        return await self.mutator.delete(task_id)
