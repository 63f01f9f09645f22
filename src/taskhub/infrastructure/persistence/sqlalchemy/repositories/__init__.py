from taskhub.infrastructure.persistence.sqlalchemy.repositories.task_repository import (
    TaskRepositorySQLAlchemy,
)
from taskhub.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "TaskRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
