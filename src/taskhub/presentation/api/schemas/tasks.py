"""Task schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from taskhub.application.dtos import TaskView
from taskhub.presentation.api.schemas.common import TITLE_MAX_LENGTH, CamelModel


class TaskCreateRequest(CamelModel):
    """Request schema for creating a task."""

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = None
    user_id: UUID


class TaskUpdateRequest(CamelModel):
    """Request schema for replacing a task's details.

    The owner can't be changed after creation.
    """

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = None
    is_completed: bool = False


class TaskResponse(CamelModel):
    """Response schema for a task including its owner."""

    id: UUID
    title: str
    description: Optional[str]
    is_completed: bool
    created_at: datetime
    updated_at: datetime
    user_id: UUID
    user_full_name: str
    user_email: str

    @classmethod
    def from_view(cls, view: TaskView) -> "TaskResponse":
        return cls(
            id=view.id,
            title=view.title,
            description=view.description,
            is_completed=view.is_completed,
            created_at=view.created_at,
            updated_at=view.updated_at,
            user_id=view.user_id,
            user_full_name=view.user_full_name,
            user_email=view.user_email,
        )
