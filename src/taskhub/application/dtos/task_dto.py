"""Task read model."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from taskhub.domain.task import Task


@dataclass(frozen=True)
class TaskView:
    """Outward view of a task, including its owner's name and email."""

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
    def from_task(cls, task: Task) -> "TaskView":
        if task.owner is None:
            msg = f"Task {task.id} was loaded without its owner"
            raise ValueError(msg)

        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            is_completed=task.is_completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
            user_id=task.user_id,
            user_full_name=task.owner.full_name,
            user_email=task.owner.email,
        )
