"""User management schemas."""

from datetime import datetime
from uuid import UUID

from taskhub.application.dtos import UserView
from taskhub.presentation.api.schemas.common import (
    Age,
    CamelModel,
    EmailAddress,
    FullName,
)


class CreateUserRequest(CamelModel):
    """Request schema for creating a user without credentials."""

    full_name: FullName
    email: EmailAddress
    age: Age


class UpdateUserRequest(CamelModel):
    """Request schema for replacing a user's profile."""

    full_name: FullName
    email: EmailAddress
    age: Age


class UserResponse(CamelModel):
    """Response schema for user data."""

    id: UUID
    full_name: str
    email: str
    age: int
    created_at: datetime

    @classmethod
    def from_view(cls, view: UserView) -> "UserResponse":
        return cls(
            id=view.id,
            full_name=view.full_name,
            email=view.email,
            age=view.age,
            created_at=view.created_at,
        )
