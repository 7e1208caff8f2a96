"""
Task Tracker API - Task Schemas

Pydantic models for task API requests and responses.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from tracker.tasks.enums import TaskStatus


class TaskCreateRequest(BaseModel):
    """Request model for creating a task.

    ``id`` and ``created_at`` are accepted but ignored; the server assigns both.
    """

    id: Optional[int] = Field(default=None, description="Ignored on create")
    title: str = Field(description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    created_by: str = Field(description="Username of the task creator")
    status: TaskStatus = Field(default=TaskStatus.OPEN, description="Task status")
    priority: str = Field(default="Medium", description="Priority label, e.g. High/Medium/Low")
    progress: int = Field(default=0, description="Progress percentage")
    due_date: Optional[datetime] = Field(default=None, description="Due date")
    created_at: Optional[datetime] = Field(default=None, description="Ignored on create")


class TaskUpdateRequest(BaseModel):
    """Request model for replacing a task. Every field is overwritten."""

    id: Optional[int] = Field(default=None, description="Must equal the ID in the URL")
    title: str = Field(description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    created_by: str = Field(description="Username of the task creator")
    status: TaskStatus = Field(default=TaskStatus.OPEN, description="Task status")
    priority: str = Field(default="Medium", description="Priority label")
    progress: int = Field(default=0, description="Progress percentage")
    due_date: Optional[datetime] = Field(default=None, description="Due date")
    created_at: Optional[datetime] = Field(default=None, description="Creation timestamp")
    version: Optional[int] = Field(
        default=None,
        description="Concurrency token from a previous read; the update fails if it is stale",
    )


class TaskResponse(BaseModel):
    """Response model for a single task."""

    id: int = Field(description="Task ID")
    title: str = Field(description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    created_by: str = Field(description="Username of the task creator")
    status: TaskStatus = Field(description="Task status")
    priority: str = Field(description="Priority label")
    progress: int = Field(description="Progress percentage")
    due_date: Optional[datetime] = Field(default=None, description="Due date")
    created_at: Optional[datetime] = Field(default=None, description="Creation timestamp")
    version: int = Field(description="Concurrency token")
