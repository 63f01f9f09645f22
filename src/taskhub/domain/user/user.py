"""User aggregate."""

from datetime import datetime
from uuid import UUID, uuid4

from taskhub.domain.shared.time import utc_now


class User:
    """
    User aggregate root.

    Holds the profile fields and the password hash. The hash is empty for
    users created through the plain user-management path.
    """

    def __init__(  # NOQA: PLR0913
        self,
        full_name: str,
        email: str,
        age: int,
        password_hash: str = "",
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._full_name = full_name
        self._email = email
        self._age = age
        self._password_hash = password_hash
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def email(self) -> str:
        return self._email

    @property
    def age(self) -> int:
        return self._age

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(self, full_name: str, email: str, age: int) -> None:
        self._full_name = full_name
        self._email = email
        self._age = age
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        full_name: str,
        email: str,
        age: int,
        password_hash: str = "",
    ) -> "User":
        return cls(
            full_name=full_name,
            email=email,
            age=age,
            password_hash=password_hash,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        full_name: str,
        email: str,
        age: int,
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            full_name=full_name,
            email=email,
            age=age,
            password_hash=password_hash,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email})"
