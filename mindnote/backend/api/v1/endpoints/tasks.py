"""
Tasks API Endpoints.

REST API endpoints for task management.
"""

from typing import Any

from fastapi import APIRouter, Depends, Query, Response

from mindnote.backend.core.dependencies import DbSession, RequestId
from mindnote.backend.core.pagination import (
    PageRequest,
    SortDirection,
    create_paginated_response,
    page_request_dependency,
)
from mindnote.backend.models.task import TaskStatus
from mindnote.backend.schemas.base import ApiResponse, ResponseMetadata
from mindnote.backend.schemas.task import TaskRequest, TaskResponse
from mindnote.backend.services.task import TaskService

router = APIRouter()

task_page = page_request_dependency("due_date", SortDirection.ASC)


@router.get(
    "",
    summary="List tasks (paginated)",
    description=(
        "Get a page of tasks. Filters combine; sort by due_date, "
        "created_at, updated_at, priority or status."
    ),
)
async def list_tasks(
    db: DbSession,
    request_id: RequestId,
    page: PageRequest = Depends(task_page),
    status: TaskStatus | None = Query(default=None, description="Lifecycle state"),
    category_id: int | None = Query(default=None, description="Category ID"),
    tag: str | None = Query(default=None, description="Tag name"),
    note_id: int | None = Query(default=None, description="Linked note ID"),
) -> dict[str, Any]:
    """List tasks with filters and pagination."""
    service = TaskService(db)
    tasks = await service.list_tasks(
        status=status,
        category_id=category_id,
        tag=tag,
        note_id=note_id,
        page=page,
    )
    return create_paginated_response(tasks, request_id=request_id)


@router.post(
    "",
    response_model=ApiResponse[TaskResponse],
    status_code=201,
    summary="Create a task",
)
async def create_task(
    data: TaskRequest,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[TaskResponse]:
    """Create a new task."""
    service = TaskService(db)
    task = await service.create_task(data)
    return ApiResponse(data=task, metadata=ResponseMetadata(request_id=request_id))


@router.get(
    "/{task_id}",
    response_model=ApiResponse[TaskResponse],
    summary="Get a task",
)
async def get_task(
    task_id: int,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[TaskResponse]:
    """Get a task by ID."""
    service = TaskService(db)
    task = await service.get_task(task_id)
    return ApiResponse(data=task, metadata=ResponseMetadata(request_id=request_id))


@router.put(
    "/{task_id}",
    response_model=ApiResponse[TaskResponse],
    summary="Replace a task",
    description=(
        "Replace a task. Omitted status or priority keep their current "
        "value; completed_at follows the status."
    ),
)
async def update_task(
    task_id: int,
    data: TaskRequest,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[TaskResponse]:
    """Replace an existing task."""
    service = TaskService(db)
    task = await service.update_task(task_id, data)
    return ApiResponse(data=task, metadata=ResponseMetadata(request_id=request_id))


@router.delete(
    "/{task_id}",
    status_code=204,
    summary="Delete a task",
)
async def delete_task(
    task_id: int,
    db: DbSession,
) -> Response:
    """Delete a task."""
    service = TaskService(db)
    await service.delete_task(task_id)
    return Response(status_code=204)
