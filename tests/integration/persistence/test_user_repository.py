"""Integration tests for UserRepositorySQLAlchemy."""

from uuid import uuid4

import pytest

from taskhub.domain.task import Task
from taskhub.domain.user import EmailAlreadyExistsError, User, UserFilter
from taskhub.infrastructure.persistence.sqlalchemy import (
    TaskRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from tests.shared.fixtures.database import (
    TEST_USER_EMAIL,
    TEST_USER_ID,
    TEST_USER_ID_2,
)


@pytest.mark.integration
class TestUserRepositoryPersistence:
    """Round trips and constraints."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_id(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = User.create(
            full_name="Carol White",
            email="carol@example.com",
            age=25,
            password_hash="$2b$04$hash",
        )

        await repo.save(user)
        await db_session.commit()

        loaded = await repo.find_by_id(user.id)
        assert loaded is not None
        assert loaded.full_name == "Carol White"
        assert loaded.email == "carol@example.com"
        assert loaded.age == 25
        assert loaded.password_hash == "$2b$04$hash"
        assert loaded.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_find_by_email_and_exists(self, db_session, seeded_users):
        repo = UserRepositorySQLAlchemy(db_session)

        found = await repo.find_by_email(TEST_USER_EMAIL)

        assert found is not None
        assert found.id == TEST_USER_ID
        assert await repo.exists_by_email(TEST_USER_EMAIL)
        assert not await repo.exists_by_email("nobody@example.com")
        assert await repo.find_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_email_lookup_ignores_case(self, db_session, seeded_users):
        repo = UserRepositorySQLAlchemy(db_session)

        found = await repo.find_by_email(TEST_USER_EMAIL.upper())

        assert found is not None
        assert found.id == TEST_USER_ID
        assert found.email == TEST_USER_EMAIL
        assert await repo.exists_by_email(TEST_USER_EMAIL.upper())

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, db_session, seeded_users):
        repo = UserRepositorySQLAlchemy(db_session)
        duplicate = User.create(full_name="Impostor", email=TEST_USER_EMAIL, age=50)

        with pytest.raises(EmailAlreadyExistsError):
            await repo.save(duplicate)

    @pytest.mark.asyncio
    async def test_save_existing_user_updates_row(self, db_session, seeded_users):
        repo = UserRepositorySQLAlchemy(db_session)
        alice = await repo.find_by_id(TEST_USER_ID)

        alice.update_profile(full_name="Alice Cooper", email=alice.email, age=31)
        await repo.save(alice)
        await db_session.commit()

        reloaded = await repo.find_by_id(TEST_USER_ID)
        assert reloaded.full_name == "Alice Cooper"
        assert reloaded.age == 31

    @pytest.mark.asyncio
    async def test_delete_missing_user_returns_false(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)

        assert await repo.delete(uuid4()) is False

    @pytest.mark.asyncio
    async def test_delete_cascades_to_tasks(self, db_session, seeded_users):
        users = UserRepositorySQLAlchemy(db_session)
        tasks = TaskRepositorySQLAlchemy(db_session)
        alice_task = Task.create(title="Buy milk", user_id=TEST_USER_ID)
        bob_task = Task.create(title="Buy bread", user_id=TEST_USER_ID_2)
        await tasks.save(alice_task)
        await tasks.save(bob_task)
        await db_session.commit()

        assert await users.delete(TEST_USER_ID) is True
        await db_session.commit()

        assert await users.find_by_id(TEST_USER_ID) is None
        assert await tasks.find_by_id(alice_task.id) is None
        assert await tasks.find_by_id(bob_task.id) is not None


@pytest.mark.integration
class TestUserRepositoryFilters:
    """Filtered listing."""

    @pytest.mark.asyncio
    async def test_no_filters_returns_everyone(self, db_session, seeded_users):
        repo = UserRepositorySQLAlchemy(db_session)

        users = await repo.find_with_filters(UserFilter())

        assert {u.id for u in users} == {TEST_USER_ID, TEST_USER_ID_2}

    @pytest.mark.asyncio
    async def test_age_is_exact_match(self, db_session, seeded_users):
        repo = UserRepositorySQLAlchemy(db_session)

        users = await repo.find_with_filters(UserFilter(age=41))

        assert [u.id for u in users] == [TEST_USER_ID_2]

    @pytest.mark.asyncio
    async def test_name_and_email_are_case_insensitive_substrings(
        self,
        db_session,
        seeded_users,
    ):
        repo = UserRepositorySQLAlchemy(db_session)

        by_name = await repo.find_with_filters(UserFilter(full_name="ALICE"))
        by_email = await repo.find_with_filters(UserFilter(email="Bob@"))

        assert [u.id for u in by_name] == [TEST_USER_ID]
        assert [u.id for u in by_email] == [TEST_USER_ID_2]

    @pytest.mark.asyncio
    async def test_filters_combine_conjunctively(self, db_session, seeded_users):
        repo = UserRepositorySQLAlchemy(db_session)

        users = await repo.find_with_filters(UserFilter(age=30, email="bob"))

        assert users == []

    @pytest.mark.asyncio
    async def test_blank_text_filters_are_ignored(self, db_session, seeded_users):
        repo = UserRepositorySQLAlchemy(db_session)

        users = await repo.find_with_filters(UserFilter(full_name="   ", email=""))

        assert len(users) == 2
