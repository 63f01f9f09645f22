"""Integration tests for an app built from explicit settings."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from taskhub.presentation.api.app import API_PREFIX, create_app
from taskhub.presentation.api.dependencies import get_db_session
from taskhub_config.settings import get_settings


@pytest.mark.integration
class TestCreateAppWithSettings:
    def test_settings_replace_global_dependencies(self, api_settings):
        app = create_app(settings=api_settings)

        assert app.dependency_overrides[get_settings]() is api_settings
        assert get_db_session in app.dependency_overrides

    def test_lifespan_creates_schema_in_configured_database(
        self,
        api_settings,
        registered_user_data,
    ):
        app = create_app(settings=api_settings)

        with TestClient(app) as client:
            register = client.post(
                f"{API_PREFIX}/auth/register",
                json=registered_user_data,
            )
            login = client.post(
                f"{API_PREFIX}/auth/login",
                json={
                    "email": registered_user_data["email"],
                    "password": registered_user_data["password"],
                },
            )

        assert register.status_code == 200
        assert login.status_code == 200
        assert Path(api_settings.sqlite_path).is_file()
