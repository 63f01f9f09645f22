"""TaskHub Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the task domain. It handles:
- Password hashing (bcrypt)
- JWT token issuance and verification

Architecture:
    taskhub_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from taskhub_auth import PasswordHashingService, JWTService
"""

from taskhub_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from taskhub_auth.schemas import IssuedToken, TokenPayload
from taskhub_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "IssuedToken",
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
]
