"""Task aggregate."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from taskhub.domain.shared.time import utc_now


@dataclass(frozen=True)
class TaskOwner:
    """Snapshot of the owning user, loaded together with the task."""

    full_name: str
    email: str


class Task:
    """
    Task aggregate root.

    A task belongs to exactly one user for its whole lifetime; only the
    title, description and completion flag can change.
    """

    def __init__(  # NOQA: PLR0913
        self,
        title: str,
        user_id: UUID,
        description: Optional[str] = None,
        is_completed: bool = False,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        owner: TaskOwner | None = None,
    ):
        self._id = id or uuid4()
        self._title = title
        self._description = description
        self._is_completed = is_completed
        self._user_id = user_id
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at
        self._owner = owner

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def is_completed(self) -> bool:
        return self._is_completed

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def owner(self) -> TaskOwner | None:
        return self._owner

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_details(
        self,
        title: str,
        description: Optional[str],
        is_completed: bool,
    ) -> None:
        self._title = title
        self._description = description
        self._is_completed = is_completed
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        title: str,
        user_id: UUID,
        description: Optional[str] = None,
    ) -> "Task":
        return cls(title=title, user_id=user_id, description=description)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        title: str,
        description: Optional[str],
        is_completed: bool,
        user_id: UUID,
        created_at: datetime,
        updated_at: datetime,
        owner: TaskOwner | None = None,
    ) -> "Task":
        return cls(
            id=id,
            title=title,
            description=description,
            is_completed=is_completed,
            user_id=user_id,
            created_at=created_at,
            updated_at=updated_at,
            owner=owner,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Task(id={self._id}, title={self._title!r}, user_id={self._user_id})"
