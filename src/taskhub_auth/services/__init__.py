"""Auth services."""

from taskhub_auth.services.jwt_service import JWTService
from taskhub_auth.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
