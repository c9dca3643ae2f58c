"""Category schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from taskboard.schemas.base import CamelModel, as_utc


class CategoryCreate(CamelModel):
    """Create a new category."""

    name: str = Field(..., max_length=255)
    color: str | None = Field(None, max_length=20)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v


class CategoryUpdate(CamelModel):
    """Update a category. Only supplied fields are applied."""

    name: str | None = Field(None, max_length=255)
    color: str | None = Field(None, max_length=20)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str | None) -> str:
        if v is None or not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    @field_validator("color")
    @classmethod
    def color_not_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Color cannot be null")
        return v


class CategoryResponse(CamelModel):
    """Category response."""

    id: int
    name: str
    color: str
    user_id: int
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def created_at_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class CategoryTaskCount(BaseModel):
    """Number of tasks linked to a category."""

    tasks: int = 0


class CategoryWithCount(CategoryResponse):
    """Category listing entry with its task count."""

    count: CategoryTaskCount = Field(
        default_factory=CategoryTaskCount, alias="_count"
    )


class CategoryListResponse(BaseModel):
    """All categories of the current user."""

    categories: list[CategoryWithCount]


class CategoryMessageResponse(BaseModel):
    """Mutation result for a category."""

    message: str
    category: CategoryResponse
