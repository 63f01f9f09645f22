"""SQLAlchemy implementation of TaskRepository.

Finders load each task together with its owner through a single join, so
listing never issues one query per task.
"""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from taskhub.domain.shared.time import ensure_tz_aware, to_utc
from taskhub.domain.task import (
    Task,
    TaskFilter,
    TaskOwner,
    TaskOwnerNotFoundError,
    TaskRepository,
)
from taskhub.infrastructure.persistence.sqlalchemy.models import TaskModel, UserModel
from taskhub.infrastructure.persistence.sqlalchemy.repositories._utils import (
    apply_predicates,
    blank_to_none,
)

logger = logging.getLogger(__name__)


class TaskRepositorySQLAlchemy(TaskRepository):
    """SQLAlchemy implementation of the TaskRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, task_id: UUID) -> Optional[Task]:
        stmt = self._base_query().where(TaskModel.id == task_id)
        result = await self._session.execute(stmt)
        model = result.unique().scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_with_filters(self, filters: TaskFilter) -> list[Task]:
        stmt = apply_predicates(self._base_query(), self._predicates(filters))
        stmt = stmt.order_by(TaskModel.created_at)

        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.unique().scalars()]

    async def save(self, task: Task) -> None:
        existing = await self._find_model_by_id(task.id)

        try:
            if existing:
                self._update_model(existing, task)
                logger.debug("Updated task: %s", task.id)
            else:
                self._session.add(self._map_to_model(task))
                logger.debug("Added task: %s (user: %s)", task.id, task.user_id)

            await self._session.flush()
        except IntegrityError as e:
            # user_id is the only foreign key on tasks
            raise TaskOwnerNotFoundError(task.user_id) from e

    async def delete(self, task_id: UUID) -> bool:
        stmt = delete(TaskModel).where(TaskModel.id == task_id)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    def _base_query(self):
        return (
            select(TaskModel)
            .join(TaskModel.user)
            .options(contains_eager(TaskModel.user))
            .execution_options(populate_existing=True)
        )

    def _predicates(self, filters: TaskFilter) -> list:
        title = blank_to_none(filters.title)
        user_full_name = blank_to_none(filters.user_full_name)

        return [
            TaskModel.is_completed == filters.is_completed
            if filters.is_completed is not None
            else None,
            TaskModel.user_id == filters.user_id if filters.user_id else None,
            TaskModel.created_at >= to_utc(filters.created_after)
            if filters.created_after
            else None,
            TaskModel.created_at <= to_utc(filters.created_before)
            if filters.created_before
            else None,
            TaskModel.title.icontains(title, autoescape=True) if title else None,
            UserModel.full_name.icontains(user_full_name, autoescape=True)
            if user_full_name
            else None,
        ]

    async def _find_model_by_id(self, task_id: UUID) -> TaskModel | None:
        stmt = select(TaskModel).where(TaskModel.id == task_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: TaskModel) -> Task:
        return Task.reconstitute(
            id=model.id,
            title=model.title,
            description=model.description,
            is_completed=model.is_completed,
            user_id=model.user_id,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
            owner=TaskOwner(full_name=model.user.full_name, email=model.user.email),
        )

    def _map_to_model(self, task: Task) -> TaskModel:
        return TaskModel(
            id=task.id,
            title=task.title,
            description=task.description,
            is_completed=task.is_completed,
            user_id=task.user_id,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    def _update_model(self, model: TaskModel, task: Task) -> None:
        model.title = task.title
        model.description = task.description
        model.is_completed = task.is_completed
        model.updated_at = task.updated_at
