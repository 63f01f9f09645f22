from taskhub.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
)
from taskhub.presentation.api.schemas.common import ErrorResponse, HealthResponse
from taskhub.presentation.api.schemas.tasks import (
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
)
from taskhub.presentation.api.schemas.users import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "AuthResponse",
    "CreateUserRequest",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "RegisterRequest",
    "TaskCreateRequest",
    "TaskResponse",
    "TaskUpdateRequest",
    "UpdateUserRequest",
    "UserResponse",
]
