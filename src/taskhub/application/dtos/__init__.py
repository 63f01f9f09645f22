from taskhub.application.dtos.task_dto import TaskView
from taskhub.application.dtos.user_dto import UserView

__all__ = [
    "TaskView",
    "UserView",
]
