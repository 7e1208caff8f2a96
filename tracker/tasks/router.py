"""
Task Tracker API - Task Router

CRUD endpoints for task management.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from tracker.database import get_database
from tracker.mutation import MutationResult
from tracker.tasks.repository import TaskRepository, TaskRepositoryInterface
from tracker.tasks.schemas import TaskCreateRequest, TaskResponse, TaskUpdateRequest
from tracker.tasks.service import TaskService


router = APIRouter(prefix="/task", tags=["Tasks"])


async def get_task_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> TaskRepositoryInterface:
    """Dependency to get task repository instance."""
    return TaskRepository(db)


async def get_task_service(
    repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)]
) -> TaskService:
    """Dependency to get task service instance."""
    return TaskService(repository)


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(
    request: Request,
    response: Response,
    service: Annotated[TaskService, Depends(get_task_service)],
    task: Annotated[Optional[TaskCreateRequest], Body()] = None,
) -> TaskResponse:
    """
    Create a new task.

    The server assigns the ID and creation timestamp; client values are ignored.
    The Location header points at the new task.
    """
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Task data is null.",
        )

    created = await service.create_task(task)
    response.headers["Location"] = str(request.url_for("get_task", task_id=created.id))
    return created


@router.get(
    "",
    response_model=List[TaskResponse],
    summary="List all tasks",
)
async def list_tasks(
    service: Annotated[TaskService, Depends(get_task_service)],
) -> List[TaskResponse]:
    return await service.list_tasks()


@router.get(
    "/username/{username}",
    response_model=List[TaskResponse],
    summary="List tasks created by a user",
)
async def list_tasks_by_username(
    username: str,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> List[TaskResponse]:
    """Returns 404 when the user has no tasks."""
    tasks = await service.list_tasks_by_username(username)
    if not tasks:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No tasks found for user: {username}",
        )
    return tasks


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get a task by ID",
)
async def get_task(
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    task = await service.get_task(task_id)
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
    return task


@router.put(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Replace a task",
)
async def update_task(
    task_id: int,
    task: TaskUpdateRequest,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> Response:
    """
    Replace a task by ID. The body ID must match the URL ID.

    Supplying ``version`` makes the update fail if the task changed since it was read.
    """
    result = await service.update_task(task_id, task)
    if result is MutationResult.ID_MISMATCH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Task ID mismatch.",
        )
    if result is MutationResult.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a task",
)
async def delete_task(
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> Response:
    result = await service.delete_task(task_id)
    if result is MutationResult.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
