"""SQLAlchemy models.

Importing this package registers every table with ``Base.metadata``.
"""

from taskhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from taskhub.infrastructure.persistence.sqlalchemy.models.task_model import TaskModel
from taskhub.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "TaskModel",
    "TimestampMixin",
    "UserModel",
]
