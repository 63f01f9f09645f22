"""Authentication router for user registration and login."""

import logging

from fastapi import APIRouter

from taskhub.presentation.api.dependencies import AuthService, DBSession
from taskhub.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
)
from taskhub.presentation.api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    summary="Register a new user",
    responses={
        200: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """
    Create an account with a password and return a bearer token for it.

    Duplicate emails are rejected with 400.
    """
    issued = await auth_service.register(
        full_name=request.full_name,
        email=request.email,
        password=request.password,
        age=request.age,
    )
    await session.commit()

    logger.info("New user registered: %s", request.email)
    return AuthResponse(token=issued.token, expiration=issued.expiration)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(request: LoginRequest, auth_service: AuthService) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    issued = await auth_service.login(email=request.email, password=request.password)
    return AuthResponse(token=issued.token, expiration=issued.expiration)
