from taskhub.application.services.authentication_service import (
    AuthenticationService,
)
from taskhub.application.services.task_service import TaskService
from taskhub.application.services.user_service import UserService

__all__ = [
    "AuthenticationService",
    "TaskService",
    "UserService",
]
