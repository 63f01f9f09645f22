from taskhub.domain.task.exceptions import TaskOwnerNotFoundError
from taskhub.domain.task.repository import TaskFilter, TaskRepository
from taskhub.domain.task.task import Task, TaskOwner

__all__ = [
    "Task",
    "TaskFilter",
    "TaskOwner",
    "TaskOwnerNotFoundError",
    "TaskRepository",
]
