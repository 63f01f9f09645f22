"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taskhub.domain.user import EmailAlreadyExistsError, User
from taskhub_auth import (
    InvalidCredentialsError,
    IssuedToken,
    JWTService,
    PasswordHashingService,
    TokenPayload,
)

if TYPE_CHECKING:
    from taskhub.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates taskhub_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - User registration
    - Login with password
    - Token verification
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _issue_token(self, user: User) -> IssuedToken:
        logger.debug("Generating token for user %s", user.email)
        return self._jwt_service.issue_token(
            user_id=user.id,
            email=user.email,
            full_name=user.full_name,
        )

    async def register(
        self,
        full_name: str,
        email: str,
        password: str,
        age: int,
    ) -> IssuedToken:
        logger.info("Attempting to register user with email: %s", email)

        if await self._user_repo.exists_by_email(email):
            logger.warning("Registration failed, email already in use: %s", email)
            raise EmailAlreadyExistsError(email)

        password_hash = self._password_service.hash(password)
        user = User.create(
            full_name=full_name,
            email=email,
            age=age,
            password_hash=password_hash,
        )
        await self._user_repo.save(user)

        logger.info("User registered: %s (id: %s)", email, user.id)
        return self._issue_token(user)

    async def login(self, email: str, password: str) -> IssuedToken:
        logger.info("Login attempt for email: %s", email)

        user = await self._user_repo.find_by_email(email)
        if user is None or not self._password_service.verify(
            password,
            user.password_hash,
        ):
            logger.warning("Invalid login attempt for email: %s", email)
            raise InvalidCredentialsError

        logger.info("User logged in: %s", email)
        return self._issue_token(user)

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
