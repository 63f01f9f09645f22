from taskhub.infrastructure.persistence.sqlalchemy.engine import build_engine
from taskhub.infrastructure.persistence.sqlalchemy.models import (
    Base,
    TaskModel,
    UserModel,
)
from taskhub.infrastructure.persistence.sqlalchemy.repositories import (
    TaskRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "TaskModel",
    "TaskRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "build_engine",
]
