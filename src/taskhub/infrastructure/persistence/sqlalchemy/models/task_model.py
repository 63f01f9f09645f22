"""SQLAlchemy model for Task aggregate."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from taskhub.infrastructure.persistence.sqlalchemy.models.user_model import UserModel


class TaskModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting Task aggregates."""

    __tablename__ = "tasks"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user: Mapped[UserModel] = relationship(back_populates="tasks")

    def __repr__(self) -> str:
        return f"<TaskModel(id={self.id}, title={self.title}, user_id={self.user_id})>"
