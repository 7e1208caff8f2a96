"""
Task Tracker API - Authentication Schemas

Pydantic models for authentication requests and responses.
"""

from typing import Optional

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    username: str = Field(default="", max_length=50)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    password: str = Field(..., min_length=1, max_length=128)


class LoginRequest(BaseModel):
    """Request schema for user login."""

    username: str
    password: str


class TokenResponse(BaseModel):
    """Response schema for successful authentication."""

    token: str


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
