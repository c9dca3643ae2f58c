"""Task API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from taskboard.api.dependencies import get_current_user, get_stats_service, get_task_service
from taskboard.database import get_db
from taskboard.models.user import User
from taskboard.schemas.task import (
    MessageResponse,
    Pagination,
    StatsResponse,
    TaskCreate,
    TaskListResponse,
    TaskMessageResponse,
    TaskResponse,
    TaskUpdate,
)
from taskboard.services.stats_service import StatsService
from taskboard.services.task_query import TaskFilters, list_tasks
from taskboard.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=TaskListResponse)
def get_tasks(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    # Raw strings: malformed values fall back to defaults instead of a 400
    status_filter: str | None = Query(None, alias="status"),
    search: str | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
    order: str | None = Query(None),
    page: str | None = Query(None),
    limit: str | None = Query(None),
    category_id: str | None = Query(None, alias="categoryId"),
    overdue: str | None = Query(None),
):
    """List the user's tasks with filtering, sorting and pagination."""
    filters = TaskFilters.from_params(
        status=status_filter,
        search=search,
        category_id=category_id,
        overdue=overdue,
        sort_by=sort_by,
        order=order,
        page=page,
        limit=limit,
    )
    result = list_tasks(db, current_user.id, filters)

    return TaskListResponse(
        tasks=[TaskResponse.model_validate(task) for task in result.tasks],
        pagination=Pagination(
            total=result.total,
            page=result.page,
            limit=result.limit,
            total_pages=result.total_pages,
        ),
    )


@router.get("/stats", response_model=StatsResponse)
def get_task_stats(
    current_user: Annotated[User, Depends(get_current_user)],
    stats_service: Annotated[StatsService, Depends(get_stats_service)],
):
    """Summary counts, weekly activity and per-category usage."""
    return stats_service.get_stats(current_user.id)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
):
    """Get a single task."""
    return task_service.get_user_task(task_id, current_user.id)


@router.post("", response_model=TaskMessageResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
):
    """Create a new task."""
    task = task_service.create(current_user.id, task_data)
    return TaskMessageResponse(
        message="Task created successfully",
        task=TaskResponse.model_validate(task),
    )


@router.put("/{task_id}", response_model=TaskMessageResponse)
def update_task(
    task_id: int,
    task_data: TaskUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
):
    """Update a task. Fields missing from the body are left untouched."""
    task = task_service.update(task_id, current_user.id, task_data)
    return TaskMessageResponse(
        message="Task updated successfully",
        task=TaskResponse.model_validate(task),
    )


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
):
    """Delete a task."""
    task_service.delete(task_id, current_user.id)
    return MessageResponse(message="Task deleted successfully")
