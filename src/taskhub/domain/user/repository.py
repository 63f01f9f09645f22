"""User repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from taskhub.domain.user.user import User


@dataclass(frozen=True)
class UserFilter:
    """Optional, conjunctive criteria for listing users.

    ``full_name`` and ``email`` are case-insensitive substring matches,
    ``age`` is an exact match. Blank strings are ignored.
    """

    age: Optional[int] = None
    full_name: Optional[str] = None
    email: Optional[str] = None


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their exact email address."""

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """Delete a user (and, through the store, their tasks)."""

    @abstractmethod
    async def find_with_filters(self, filters: UserFilter) -> list[User]:
        """List users matching all provided criteria."""
