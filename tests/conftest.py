"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/            # Fast, isolated tests (mocked repositories)
    ├── integration/     # Repositories and HTTP API against SQLite
    │   ├── persistence/
    │   └── api/
    └── shared/          # Shared fixtures and utilities

Integration tests run against in-memory or temporary SQLite databases and
need no external services.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from taskhub_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Ensure no cached settings leak into or out of the test session."""
    clear_settings_cache()
    yield
    clear_settings_cache()
