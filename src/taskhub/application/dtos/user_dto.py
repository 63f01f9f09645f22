"""User read model."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from taskhub.domain.user import User


@dataclass(frozen=True)
class UserView:
    """Outward view of a user. The password hash is never part of it."""

    id: UUID
    full_name: str
    email: str
    age: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=user.id,
            full_name=user.full_name,
            email=user.email,
            age=user.age,
            created_at=user.created_at,
        )
