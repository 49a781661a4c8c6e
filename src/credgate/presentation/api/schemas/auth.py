"""Authentication schemas for request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Request schema for user login.

    Empty strings are accepted and answered like any other mismatch.
    """

    username: str = Field(..., max_length=150)
    password: str = Field(..., max_length=128)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "damian",
                "password": "securepassword123",
            },
        },
    )


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    token: str
    token_type: str = "bearer"
    expires_at: datetime


class ErrorResponse(BaseModel):
    """Response schema for a failed login."""

    errors: list[str]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"errors": ["Invalid username or password"]},
        },
    )
