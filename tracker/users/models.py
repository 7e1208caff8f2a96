from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def _utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


@dataclass
class User:
    """User entity for authentication."""

    id: Optional[int]
    username: str
    password_hash: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_on: Optional[datetime] = field(default_factory=_utcnow)
    version: int = 1

    def mark_created(self, now: datetime) -> None:
        self.created_on = now

    def to_dict(self) -> dict:
        """Convert user to dictionary for MongoDB storage."""
        return {
            "_id": self.id,
            "username": self.username,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "password_hash": self.password_hash,
            "created_on": self.created_on,
            "version": self.version,
        }

    def replacement_fields(self) -> dict:
        """Fields written by a full replace.

        Server-owned fields left unset (no new password, no timestamp) keep
        their stored values.
        """
        fields = self.to_dict()
        del fields["_id"]
        del fields["version"]
        if self.password_hash is None:
            del fields["password_hash"]
        if self.created_on is None:
            del fields["created_on"]
        return fields

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create user from MongoDB document."""
        return cls(
            id=data["_id"],
            username=data["username"],
            password_hash=data.get("password_hash"),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            created_on=data.get("created_on"),
            version=data.get("version", 1),
        )
