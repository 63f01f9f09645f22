"""REST API presentation layer for TaskHub.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain/auth exceptions to HTTP responses
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from taskhub.presentation.api.app import create_app

__all__ = ["create_app"]
