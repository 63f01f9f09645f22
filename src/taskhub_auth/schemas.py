"""Auth schemas and data structures.

Simple data classes used for transferring token data between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        The unique identifier of the user (``sub`` claim)
    email
        The user's email address
    full_name
        The user's full name (``FullName`` claim)
    exp
        Token expiration timestamp
    """

    user_id: UUID
    email: str
    full_name: str
    exp: datetime


@dataclass(frozen=True)
class IssuedToken:
    """A freshly signed bearer token and the moment it stops being valid."""

    token: str
    expiration: datetime
