"""SQLAlchemy models."""

from taskboard.models.category import Category
from taskboard.models.task import Task, TaskCategory
from taskboard.models.user import User

__all__ = [
    "User",
    "Category",
    "Task",
    "TaskCategory",
]
