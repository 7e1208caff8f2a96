"""
Task Tracker API - User Schemas

Pydantic models for user resource requests and responses.
The password hash never appears in a response.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UserCreateRequest(BaseModel):
    """Request schema for creating a user through the user resource."""

    id: Optional[int] = Field(default=None, description="Ignored on create")
    username: Optional[str] = Field(default=None, max_length=50)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    password: str = Field(..., min_length=1, max_length=128)


class UserUpdateRequest(BaseModel):
    """Request schema for replacing a user.

    ``password`` is optional; when omitted the stored hash is kept.
    """

    id: Optional[int] = Field(default=None, description="Must equal the ID in the URL")
    username: str = Field(..., min_length=1, max_length=50)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_on: Optional[datetime] = None
    password: Optional[str] = Field(default=None, min_length=1, max_length=128)
    version: Optional[int] = Field(
        default=None,
        description="Concurrency token from a previous read; the update fails if it is stale",
    )


class UserResponse(BaseModel):
    """Public user information response."""

    id: int
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_on: Optional[datetime] = None
    version: int
