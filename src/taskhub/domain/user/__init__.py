from taskhub.domain.user.exceptions import EmailAlreadyExistsError
from taskhub.domain.user.repository import UserFilter, UserRepository
from taskhub.domain.user.user import User

__all__ = [
    "EmailAlreadyExistsError",
    "User",
    "UserFilter",
    "UserRepository",
]
