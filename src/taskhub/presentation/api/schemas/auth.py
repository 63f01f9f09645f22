"""Authentication schemas for request/response models."""

from datetime import datetime

from pydantic import ConfigDict, Field

from taskhub.presentation.api.schemas.common import (
    Age,
    CamelModel,
    EmailAddress,
    FullName,
)


class RegisterRequest(CamelModel):
    """Request schema for user registration."""

    full_name: FullName
    email: EmailAddress
    password: str = Field(..., min_length=1, max_length=72)
    age: Age

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "fullName": "Jane Doe",
                "email": "jane@example.com",
                "password": "securepassword123",
                "age": 34,
            },
        },
    )


class LoginRequest(CamelModel):
    """Request schema for user login."""

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "jane@example.com",
                "password": "securepassword123",
            },
        },
    )


class AuthResponse(CamelModel):
    """Signed bearer token and its expiration (UTC)."""

    token: str
    expiration: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "expiration": "2024-12-05T11:30:00Z",
            },
        },
    )
