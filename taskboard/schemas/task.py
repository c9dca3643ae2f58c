"""Task schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from taskboard.schemas.base import CamelModel, as_utc
from taskboard.schemas.category import CategoryResponse


class TaskCreate(CamelModel):
    """Create a new task."""

    title: str = Field(..., max_length=500)
    description: str | None = Field(None, max_length=5000)
    due_date: datetime | None = None
    category_ids: list[int] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        return v

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class TaskUpdate(CamelModel):
    """Partial task update.

    Only fields present in the request body are applied (``model_fields_set``).
    ``description`` and ``dueDate`` may be sent as null to clear them;
    ``categoryIds: []`` removes every category.
    """

    title: str | None = Field(None, max_length=500)
    description: str | None = Field(None, max_length=5000)
    completed: bool | None = None
    due_date: datetime | None = None
    category_ids: list[int] | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str | None) -> str:
        if v is None or not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()

    @field_validator("completed")
    @classmethod
    def completed_not_null(cls, v: bool | None) -> bool:
        if v is None:
            raise ValueError("Completed must be boolean")
        return v

    @field_validator("category_ids")
    @classmethod
    def category_ids_not_null(cls, v: list[int] | None) -> list[int]:
        if v is None:
            raise ValueError("Category ids must be a list")
        return v

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class TaskCategoryResponse(CamelModel):
    """Join row between a task and a category."""

    task_id: int
    category_id: int
    category: CategoryResponse


class TaskResponse(CamelModel):
    """Task response."""

    id: int
    title: str
    description: str | None
    completed: bool
    due_date: datetime | None
    user_id: int
    created_at: datetime
    updated_at: datetime
    categories: list[TaskCategoryResponse] = []

    @field_validator("due_date", "created_at", "updated_at")
    @classmethod
    def timestamps_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class TaskMessageResponse(BaseModel):
    """Mutation result for a task."""

    message: str
    task: TaskResponse


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class Pagination(CamelModel):
    """Pagination block of a task listing."""

    total: int
    page: int
    limit: int
    total_pages: int


class TaskListResponse(BaseModel):
    """A page of tasks."""

    tasks: list[TaskResponse]
    pagination: Pagination


class TaskStats(CamelModel):
    """Summary counts for the dashboard."""

    total: int
    completed: int
    pending: int
    overdue: int
    completion_rate: int


class WeeklyEntry(BaseModel):
    """Tasks created on one calendar day."""

    date: str
    count: int


class CategoryStat(BaseModel):
    """Task count for a single category."""

    name: str
    color: str
    count: int


class StatsResponse(CamelModel):
    """Dashboard statistics."""

    stats: TaskStats
    weekly_data: list[WeeklyEntry]
    category_stats: list[CategoryStat]
