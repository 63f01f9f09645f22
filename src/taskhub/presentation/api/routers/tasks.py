"""Task router for CRUD operations and filtered listing."""

import logging
from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status

from taskhub.domain.task import TaskFilter
from taskhub.presentation.api.dependencies import (
    DBSession,
    TaskServiceDep,
    get_current_user,
)
from taskhub.presentation.api.schemas.common import ErrorResponse
from taskhub.presentation.api.schemas.tasks import (
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    responses={
        201: {"description": "Task created"},
        400: {"model": ErrorResponse, "description": "Owner does not exist"},
    },
)
async def create_task(
    payload: TaskCreateRequest,
    request: Request,
    response: Response,
    task_service: TaskServiceDep,
    session: DBSession,
) -> TaskResponse:
    logger.info("POST /task called for user %s", payload.user_id)

    view = await task_service.create(
        title=payload.title,
        user_id=payload.user_id,
        description=payload.description,
    )
    await session.commit()

    response.headers["Location"] = str(
        request.url_for("get_task", task_id=str(view.id)),
    )
    return TaskResponse.from_view(view)


@router.get(
    "/{task_id}",
    name="get_task",
    summary="Get a task by ID",
    response_model=TaskResponse,
    responses={404: {"description": "Task not found"}},
)
async def get_task(
    task_id: UUID,
    task_service: TaskServiceDep,
) -> Response | TaskResponse:
    view = await task_service.get_by_id(task_id)
    if view is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return TaskResponse.from_view(view)


@router.get("", summary="List tasks")
async def list_tasks(
    task_service: TaskServiceDep,
    is_completed: Annotated[Optional[bool], Query(alias="isCompleted")] = None,
    user_id: Annotated[Optional[UUID], Query(alias="userId")] = None,
    created_after: Annotated[Optional[datetime], Query(alias="createdAfter")] = None,
    created_before: Annotated[
        Optional[datetime],
        Query(alias="createdBefore"),
    ] = None,
    title: Annotated[Optional[str], Query()] = None,
    user_full_name: Annotated[Optional[str], Query(alias="userFullName")] = None,
) -> list[TaskResponse]:
    """
    List tasks matching every supplied filter.

    ``title`` and ``userFullName`` are case-insensitive substring matches;
    blank values are ignored. ``createdAfter``/``createdBefore`` are
    inclusive bounds.
    """
    filters = TaskFilter(
        is_completed=is_completed,
        user_id=user_id,
        created_after=created_after,
        created_before=created_before,
        title=title,
        user_full_name=user_full_name,
    )
    views = await task_service.list_tasks(filters)
    return [TaskResponse.from_view(view) for view in views]


@router.put(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    summary="Update a task",
    responses={404: {"description": "Task not found"}},
)
async def update_task(
    task_id: UUID,
    payload: TaskUpdateRequest,
    task_service: TaskServiceDep,
    session: DBSession,
) -> Response:
    updated = await task_service.update(
        task_id=task_id,
        title=payload.title,
        description=payload.description,
        is_completed=payload.is_completed,
    )
    if not updated:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    summary="Delete a task",
    responses={404: {"description": "Task not found"}},
)
async def delete_task(
    task_id: UUID,
    task_service: TaskServiceDep,
    session: DBSession,
) -> Response:
    if not await task_service.delete(task_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
