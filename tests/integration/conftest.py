"""Fixtures shared by persistence and API integration tests."""

from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    db_session,
    seeded_users,
)
