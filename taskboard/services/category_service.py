"""Category service: per-user labels and their task counts."""

import logging

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskboard.config import get_settings
from taskboard.models.category import Category
from taskboard.models.task import TaskCategory
from taskboard.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)

settings = get_settings()


class CategoryService:
    """Service for category-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def get_user_category(self, category_id: int, user_id: int) -> Category:
        """Get a category owned by the user, 404 otherwise."""
        category = (
            self.db.query(Category)
            .filter(Category.id == category_id, Category.user_id == user_id)
            .first()
        )
        if not category:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
        return category

    def task_counts(self, user_id: int) -> dict[int, int]:
        """Map category id -> number of linked tasks, for the user's categories."""
        rows = (
            self.db.query(TaskCategory.category_id, func.count(TaskCategory.task_id))
            .join(Category, Category.id == TaskCategory.category_id)
            .filter(Category.user_id == user_id)
            .group_by(TaskCategory.category_id)
            .all()
        )
        return dict(rows)

    def list_categories(self, user_id: int) -> list[Category]:
        return (
            self.db.query(Category)
            .filter(Category.user_id == user_id)
            .order_by(Category.name, Category.id)
            .all()
        )

    def list_with_counts(self, user_id: int) -> list[tuple[Category, int]]:
        """All of the user's categories ordered by name, with task counts."""
        counts = self.task_counts(user_id)
        return [(c, counts.get(c.id, 0)) for c in self.list_categories(user_id)]

    def _ensure_unique_name(self, user_id: int, name: str, exclude_id: int | None = None) -> None:
        query = self.db.query(Category).filter(Category.user_id == user_id, Category.name == name)
        if exclude_id is not None:
            query = query.filter(Category.id != exclude_id)
        if query.first():
            logger.info(f"Rejected duplicate category name for user {user_id}")
            raise self._duplicate_name()

    @staticmethod
    def _duplicate_name() -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Category already exists",
        )

    def _commit_unique(self, user_id: int) -> None:
        """Commit, turning a (user_id, name) constraint violation into a 400."""
        try:
            self.db.commit()
        except IntegrityError as e:
            # A concurrent request took the name after our check
            self.db.rollback()
            logger.info(f"Rejected duplicate category name for user {user_id} on commit")
            raise self._duplicate_name() from e

    def create(self, user_id: int, data: CategoryCreate) -> Category:
        """Create a category. Name must be unique for the user."""
        self._ensure_unique_name(user_id, data.name)

        category = Category(
            name=data.name,
            color=data.color or settings.default_category_color,
            user_id=user_id,
        )
        self.db.add(category)
        self._commit_unique(user_id)
        self.db.refresh(category)
        logger.info(f"Created category {category.id} for user {user_id}")
        return category

    def update(self, category_id: int, user_id: int, data: CategoryUpdate) -> Category:
        """Apply the supplied fields to a category."""
        category = self.get_user_category(category_id, user_id)
        fields = data.model_fields_set

        if "name" in fields and data.name != category.name:
            self._ensure_unique_name(user_id, data.name, exclude_id=category.id)
            category.name = data.name
        if "color" in fields:
            category.color = data.color

        self._commit_unique(user_id)
        self.db.refresh(category)
        return category

    def delete(self, category_id: int, user_id: int) -> None:
        """Delete a category. Its tasks stay, uncategorized from it."""
        category = self.get_user_category(category_id, user_id)
        self.db.delete(category)
        self.db.commit()
        logger.info(f"Deleted category {category_id} for user {user_id}")

    def owned_ids(self, user_id: int, category_ids: list[int]) -> set[int]:
        """Subset of ``category_ids`` that belong to the user."""
        if not category_ids:
            return set()
        rows = (
            self.db.query(Category.id)
            .filter(Category.user_id == user_id, Category.id.in_(category_ids))
            .all()
        )
        return {category_id for (category_id,) in rows}
