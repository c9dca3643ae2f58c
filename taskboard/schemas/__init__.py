"""Pydantic schemas for API requests and responses."""

from taskboard.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from taskboard.schemas.category import (
    CategoryCreate,
    CategoryListResponse,
    CategoryMessageResponse,
    CategoryResponse,
    CategoryUpdate,
    CategoryWithCount,
)
from taskboard.schemas.task import (
    MessageResponse,
    StatsResponse,
    TaskCreate,
    TaskListResponse,
    TaskMessageResponse,
    TaskResponse,
    TaskUpdate,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "CategoryWithCount",
    "CategoryListResponse",
    "CategoryMessageResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
    "TaskMessageResponse",
    "TaskListResponse",
    "MessageResponse",
    "StatsResponse",
]
