"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.domain.shared.time import ensure_tz_aware
from taskhub.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserFilter,
    UserRepository,
)
from taskhub.infrastructure.persistence.sqlalchemy.models import UserModel
from taskhub.infrastructure.persistence.sqlalchemy.repositories._utils import (
    apply_predicates,
    blank_to_none,
)

logger = logging.getLogger(__name__)


def _email_matches(email: str):
    # addresses are stored as submitted and compared case-insensitively
    return func.lower(UserModel.email) == email.lower()


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(_email_matches(email))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(UserModel.id).where(_email_matches(email))
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                model = self._map_to_model(user)
                self._session.add(model)
                logger.debug("Added user: %s (email: %s)", user.id, user.email)

            await self._session.flush()
        except IntegrityError as e:
            # email carries the only unique constraint besides the primary key
            raise EmailAlreadyExistsError(user.email) from e

    async def delete(self, user_id: UUID) -> bool:
        stmt = delete(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)

        deleted = result.rowcount > 0
        if deleted:
            logger.debug("Deleted user row: %s", user_id)
        return deleted

    async def find_with_filters(self, filters: UserFilter) -> list[User]:
        full_name = blank_to_none(filters.full_name)
        email = blank_to_none(filters.email)

        stmt = apply_predicates(
            select(UserModel),
            [
                UserModel.age == filters.age if filters.age is not None else None,
                UserModel.full_name.icontains(full_name, autoescape=True)
                if full_name
                else None,
                UserModel.email.icontains(email, autoescape=True) if email else None,
            ],
        ).order_by(UserModel.created_at)

        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            full_name=model.full_name,
            email=model.email,
            age=model.age,
            password_hash=model.password_hash,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            full_name=user.full_name,
            email=user.email,
            age=user.age,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.full_name = user.full_name
        model.email = user.email
        model.age = user.age
        model.password_hash = user.password_hash
        model.updated_at = user.updated_at
