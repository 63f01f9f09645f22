"""Shared test fixtures."""

from tests.shared.fixtures.database import (
    TEST_USER_EMAIL,
    TEST_USER_EMAIL_2,
    TEST_USER_ID,
    TEST_USER_ID_2,
    async_engine,
    db_session,
    seeded_users,
)

__all__ = [
    "TEST_USER_EMAIL",
    "TEST_USER_EMAIL_2",
    "TEST_USER_ID",
    "TEST_USER_ID_2",
    "async_engine",
    "db_session",
    "seeded_users",
]
