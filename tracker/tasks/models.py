"""
Task Tracker API - Task Models

Internal task model for database operations.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from tracker.tasks.enums import TaskStatus


def _utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


@dataclass
class Task:
    """Task entity for database storage.

    ``created_by`` is the creator's username, not a reference to a user id.
    """

    id: Optional[int]
    title: str
    created_by: str
    status: TaskStatus = TaskStatus.OPEN
    priority: str = "Medium"
    description: Optional[str] = None
    progress: int = 0
    due_date: Optional[datetime] = None
    created_at: Optional[datetime] = field(default_factory=_utcnow)
    version: int = 1

    def mark_created(self, now: datetime) -> None:
        self.created_at = now

    def to_dict(self) -> dict:
        """Convert task to dictionary for MongoDB storage."""
        return {
            "_id": self.id,
            "title": self.title,
            "created_by": self.created_by,
            "status": self.status.value,
            "priority": self.priority,
            "description": self.description,
            "progress": self.progress,
            "due_date": self.due_date,
            "created_at": self.created_at,
            "version": self.version,
        }

    def replacement_fields(self) -> dict:
        """Fields written by a full replace.

        A replace without ``created_at`` keeps the stored timestamp.
        """
        fields = self.to_dict()
        del fields["_id"]
        del fields["version"]
        if self.created_at is None:
            del fields["created_at"]
        return fields

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create task from MongoDB document."""
        return cls(
            id=data["_id"],
            title=data["title"],
            created_by=data["created_by"],
            status=TaskStatus(data["status"]),
            priority=data.get("priority", "Medium"),
            description=data.get("description"),
            progress=data.get("progress", 0),
            due_date=data.get("due_date"),
            created_at=data.get("created_at"),
            version=data.get("version", 1),
        )
