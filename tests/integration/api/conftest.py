"""Pytest fixtures for API integration tests."""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from taskhub.infrastructure.persistence.sqlalchemy import build_engine
from taskhub.infrastructure.persistence.sqlalchemy.init_db import create_tables
from taskhub.presentation.api.app import API_PREFIX, create_app
from taskhub.presentation.api.dependencies import get_db_session
from taskhub_config.settings import Settings, get_settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # noqa: S105


@pytest.fixture
def api_prefix() -> str:
    """Get the API prefix for building URLs."""
    return API_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings backed by a throwaway SQLite file."""
    return Settings(
        _env_file=None,
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_backend="sqlite",
        sqlite_path=str(tmp_path / "api.db"),
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        bcrypt_rounds=4,
    )


@pytest.fixture
def test_db_engine(api_settings):
    """
    Create the schema in a file-backed SQLite database.

    NullPool keeps connections from outliving the event loop that opened
    them, since the TestClient runs requests on its own loop.
    """
    engine = build_engine(api_settings.database_url, poolclass=NullPool)
    asyncio.run(create_tables(engine))

    yield engine

    asyncio.run(engine.dispose())


@pytest.fixture
def test_client(api_settings, test_db_engine) -> TestClient:
    """Create a test client wired to the test database and settings."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_settings] = lambda: api_settings

    return TestClient(app)


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "fullName": "Test User",
        "email": "test@example.com",
        "password": "SecurePassword123!",
        "age": 35,
    }


@pytest.fixture
def auth_headers(test_client, registered_user_data, api_prefix) -> dict:
    """Get auth headers for a registered user."""
    response = test_client.post(
        f"{api_prefix}/auth/register",
        json=registered_user_data,
    )
    assert response.status_code == 200

    token = response.json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def create_user(test_client, auth_headers, api_prefix):
    """Create a user through the API and return its JSON representation."""

    def _create(full_name: str, email: str, age: int = 30) -> dict:
        response = test_client.post(
            f"{api_prefix}/user",
            json={"fullName": full_name, "email": email, "age": age},
            headers=auth_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_task(test_client, auth_headers, api_prefix):
    """Create a task through the API and return its JSON representation."""

    def _create(title: str, user_id: str, description: str | None = None) -> dict:
        response = test_client.post(
            f"{api_prefix}/task",
            json={"title": title, "description": description, "userId": user_id},
            headers=auth_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
