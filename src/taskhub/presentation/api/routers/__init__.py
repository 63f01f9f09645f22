from taskhub.presentation.api.routers.auth import router as auth_router
from taskhub.presentation.api.routers.tasks import router as tasks_router
from taskhub.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "tasks_router",
    "users_router",
]
