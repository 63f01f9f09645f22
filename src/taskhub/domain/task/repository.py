"""Task repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from taskhub.domain.task.task import Task


@dataclass(frozen=True)
class TaskFilter:
    """Optional, conjunctive criteria for listing tasks.

    Attributes
    ----------
    is_completed
        Exact match on the completion flag
    user_id
        Exact match on the owning user
    created_after
        Inclusive lower bound on creation time
    created_before
        Inclusive upper bound on creation time
    title
        Case-insensitive substring of the title
    user_full_name
        Case-insensitive substring of the owner's full name
    """

    is_completed: Optional[bool] = None
    user_id: Optional[UUID] = None
    created_after: Optional[datetime] = None
    created_before: Optional[datetime] = None
    title: Optional[str] = None
    user_full_name: Optional[str] = None


class TaskRepository(ABC):
    """Repository interface for Task aggregates.

    Tasks returned by the finders carry their owner snapshot.
    """

    @abstractmethod
    async def find_by_id(self, task_id: UUID) -> Optional[Task]:
        """Find a task by its ID."""

    @abstractmethod
    async def find_with_filters(self, filters: TaskFilter) -> list[Task]:
        """List tasks matching all provided criteria."""

    @abstractmethod
    async def save(self, task: Task) -> None:
        """Save or update a task."""

    @abstractmethod
    async def delete(self, task_id: UUID) -> bool:
        """Delete a task by ID."""
