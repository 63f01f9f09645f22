"""User router for CRUD operations and filtered listing."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status

from taskhub.presentation.api.dependencies import (
    DBSession,
    UserServiceDep,
    get_current_user,
)
from taskhub.presentation.api.schemas.common import ErrorResponse
from taskhub.presentation.api.schemas.users import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", summary="List users")
async def list_users(
    user_service: UserServiceDep,
    age: Annotated[Optional[int], Query()] = None,
    full_name: Annotated[Optional[str], Query(alias="fullName")] = None,
    email: Annotated[Optional[str], Query()] = None,
) -> list[UserResponse]:
    """
    List users matching every supplied filter.

    ``age`` is an exact match; ``fullName`` and ``email`` are
    case-insensitive substring matches.
    """
    views = await user_service.list_users(age=age, full_name=full_name, email=email)
    return [UserResponse.from_view(view) for view in views]


@router.get(
    "/{user_id}",
    name="get_user",
    summary="Get a user by ID",
    response_model=UserResponse,
    responses={404: {"description": "User not found"}},
)
async def get_user(
    user_id: UUID,
    user_service: UserServiceDep,
) -> Response | UserResponse:
    view = await user_service.get_by_id(user_id)
    if view is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return UserResponse.from_view(view)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        201: {"description": "User created"},
        400: {
            "model": ErrorResponse,
            "description": "Invalid input or duplicate email",
        },
    },
)
async def create_user(
    payload: CreateUserRequest,
    request: Request,
    response: Response,
    user_service: UserServiceDep,
    session: DBSession,
) -> UserResponse:
    """
    Create a user without credentials.

    Users created here can't log in; use ``/auth/register`` for that.
    """
    view = await user_service.create(
        full_name=payload.full_name,
        email=payload.email,
        age=payload.age,
    )
    await session.commit()

    response.headers["Location"] = str(
        request.url_for("get_user", user_id=str(view.id)),
    )
    return UserResponse.from_view(view)


@router.put(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    summary="Update a user",
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Invalid input or duplicate email",
        },
        404: {"description": "User not found"},
    },
)
async def update_user(
    user_id: UUID,
    payload: UpdateUserRequest,
    user_service: UserServiceDep,
    session: DBSession,
) -> Response:
    updated = await user_service.update(
        user_id=user_id,
        full_name=payload.full_name,
        email=payload.email,
        age=payload.age,
    )
    if not updated:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    summary="Delete a user and all of their tasks",
    responses={404: {"description": "User not found"}},
)
async def delete_user(
    user_id: UUID,
    user_service: UserServiceDep,
    session: DBSession,
) -> Response:
    if not await user_service.delete(user_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    await session.commit()
    logger.info("User %s removed", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
