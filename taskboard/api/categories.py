"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from taskboard.api.dependencies import get_category_service, get_current_user
from taskboard.models.user import User
from taskboard.schemas.category import (
    CategoryCreate,
    CategoryListResponse,
    CategoryMessageResponse,
    CategoryResponse,
    CategoryTaskCount,
    CategoryUpdate,
    CategoryWithCount,
)
from taskboard.schemas.task import MessageResponse
from taskboard.services.category_service import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=CategoryListResponse)
def get_categories(
    current_user: Annotated[User, Depends(get_current_user)],
    category_service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Get all categories of the user with their task counts."""
    categories = []
    for category, task_count in category_service.list_with_counts(current_user.id):
        entry = CategoryWithCount.model_validate(category)
        entry.count = CategoryTaskCount(tasks=task_count)
        categories.append(entry)

    return CategoryListResponse(categories=categories)


@router.post("", response_model=CategoryMessageResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    category_data: CategoryCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    category_service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Create a new category."""
    category = category_service.create(current_user.id, category_data)
    return CategoryMessageResponse(
        message="Category created successfully",
        category=CategoryResponse.model_validate(category),
    )


@router.put("/{category_id}", response_model=CategoryMessageResponse)
def update_category(
    category_id: int,
    category_data: CategoryUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    category_service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Update a category's name and/or color."""
    category = category_service.update(category_id, current_user.id, category_data)
    return CategoryMessageResponse(
        message="Category updated successfully",
        category=CategoryResponse.model_validate(category),
    )


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    category_service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Delete a category. Its tasks are kept, minus this category."""
    category_service.delete(category_id, current_user.id)
    return MessageResponse(message="Category deleted successfully")
