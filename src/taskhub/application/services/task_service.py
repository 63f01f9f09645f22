"""Task management service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from taskhub.application.dtos import TaskView
from taskhub.domain.task import Task, TaskFilter

if TYPE_CHECKING:
    from taskhub.domain.task import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """CRUD and filtered listing over tasks."""

    def __init__(self, task_repository: TaskRepository):
        self._task_repo = task_repository

    async def create(
        self,
        title: str,
        user_id: UUID,
        description: Optional[str] = None,
    ) -> TaskView:
        """Create a task for an existing user.

        Raises
        ------
        TaskOwnerNotFoundError
            If the store rejects ``user_id``
        """
        logger.info("Creating task for user %s with title '%s'", user_id, title)

        task = Task.create(title=title, user_id=user_id, description=description)
        await self._task_repo.save(task)

        # Re-read to pick up the owner's name and email
        created = await self._task_repo.find_by_id(task.id)
        if created is None:
            msg = f"Task {task.id} vanished right after creation"
            raise RuntimeError(msg)

        logger.info("Task %s created successfully", task.id)
        return TaskView.from_task(created)

    async def get_by_id(self, task_id: UUID) -> Optional[TaskView]:
        logger.debug("Retrieving task by ID %s", task_id)

        task = await self._task_repo.find_by_id(task_id)
        if task is None:
            logger.warning("Task with ID %s not found", task_id)
            return None

        return TaskView.from_task(task)

    async def list_tasks(self, filters: TaskFilter | None = None) -> list[TaskView]:
        filters = filters or TaskFilter()
        logger.debug("Listing tasks with filters: %s", filters)

        tasks = await self._task_repo.find_with_filters(filters)

        logger.info("Retrieved %d tasks", len(tasks))
        return [TaskView.from_task(task) for task in tasks]

    async def update(
        self,
        task_id: UUID,
        title: str,
        description: Optional[str],
        is_completed: bool,
    ) -> bool:
        logger.info("Updating task %s", task_id)

        task = await self._task_repo.find_by_id(task_id)
        if task is None:
            logger.warning("Update failed. Task %s not found", task_id)
            return False

        task.update_details(
            title=title,
            description=description,
            is_completed=is_completed,
        )
        await self._task_repo.save(task)

        logger.info("Task %s updated successfully", task_id)
        return True

    async def delete(self, task_id: UUID) -> bool:
        logger.info("Attempting to delete task %s", task_id)

        deleted = await self._task_repo.delete(task_id)
        if not deleted:
            logger.warning("Delete failed. Task %s not found", task_id)
            return False

        logger.info("Task %s deleted successfully", task_id)
        return True
