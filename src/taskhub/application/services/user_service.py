"""User management service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from taskhub.application.dtos import UserView
from taskhub.domain.user import EmailAlreadyExistsError, User, UserFilter

if TYPE_CHECKING:
    from taskhub.domain.user import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    CRUD and filtered listing over users.

    Users created here have no password; only registration sets one.
    Absent users are reported as ``None``/``False``, never raised.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def list_users(
        self,
        age: Optional[int] = None,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> list[UserView]:
        logger.debug(
            "Listing users with filters: age=%s, full_name=%s, email=%s",
            age,
            full_name,
            email,
        )
        users = await self._user_repo.find_with_filters(
            UserFilter(age=age, full_name=full_name, email=email),
        )
        logger.info("Retrieved %d users", len(users))
        return [UserView.from_user(user) for user in users]

    async def get_by_id(self, user_id: UUID) -> Optional[UserView]:
        logger.debug("Retrieving user by ID %s", user_id)

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            logger.warning("User with ID %s not found", user_id)
            return None

        return UserView.from_user(user)

    async def create(self, full_name: str, email: str, age: int) -> UserView:
        logger.info("Creating new user with email %s", email)

        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        user = User.create(full_name=full_name, email=email, age=age)
        await self._user_repo.save(user)

        logger.info("User %s created successfully", user.id)
        return UserView.from_user(user)

    async def update(
        self,
        user_id: UUID,
        full_name: str,
        email: str,
        age: int,
    ) -> bool:
        logger.info("Updating user %s", user_id)

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            logger.warning("Update failed. User %s not found", user_id)
            return False

        email_changed = email.lower() != user.email.lower()
        if email_changed and await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        user.update_profile(full_name=full_name, email=email, age=age)
        await self._user_repo.save(user)

        logger.info("User %s updated successfully", user_id)
        return True

    async def delete(self, user_id: UUID) -> bool:
        logger.info("Attempting to delete user %s", user_id)

        deleted = await self._user_repo.delete(user_id)
        if not deleted:
            logger.warning("Delete failed. User %s not found", user_id)
            return False

        logger.info("User %s deleted with all of their tasks", user_id)
        return True
