"""Task service: create, update and delete user tasks."""

import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, selectinload

from taskboard.models.task import Task, TaskCategory
from taskboard.schemas.task import TaskCreate, TaskUpdate
from taskboard.services.category_service import CategoryService

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task-related operations."""

    def __init__(self, db: Session):
        self.db = db
        self.categories = CategoryService(db)

    def get_user_task(self, task_id: int, user_id: int) -> Task:
        """Get a task owned by the user, 404 otherwise."""
        task = (
            self.db.query(Task)
            .options(selectinload(Task.categories).selectinload(TaskCategory.category))
            .filter(Task.id == task_id, Task.user_id == user_id)
            .first()
        )
        if not task:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
        return task

    def _validated_category_ids(self, user_id: int, category_ids: list[int]) -> list[int]:
        """Deduplicate ids, rejecting any the user does not own."""
        unique_ids = list(dict.fromkeys(category_ids))
        owned = self.categories.owned_ids(user_id, unique_ids)
        if len(owned) != len(unique_ids):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid category")
        return unique_ids

    def create(self, user_id: int, data: TaskCreate) -> Task:
        """Create a task and link its categories."""
        category_ids = self._validated_category_ids(user_id, data.category_ids)

        task = Task(
            title=data.title,
            description=data.description,
            due_date=data.due_date,
            completed=False,
            user_id=user_id,
        )
        task.categories = [TaskCategory(category_id=cid) for cid in category_ids]
        self.db.add(task)
        self.db.commit()
        logger.info(f"Created task {task.id} for user {user_id}")
        return self.get_user_task(task.id, user_id)

    def update(self, task_id: int, user_id: int, data: TaskUpdate) -> Task:
        """Apply only the fields present in the request."""
        task = self.get_user_task(task_id, user_id)
        fields = data.model_fields_set

        if "title" in fields:
            task.title = data.title
        if "description" in fields:
            task.description = data.description
        if "completed" in fields:
            task.completed = data.completed
        if "due_date" in fields:
            task.due_date = data.due_date

        if "category_ids" in fields:
            category_ids = self._validated_category_ids(user_id, data.category_ids)
            self._replace_categories(task, category_ids)

        self.db.commit()
        return self.get_user_task(task.id, user_id)

    def _replace_categories(self, task: Task, category_ids: list[int]) -> None:
        """Delete every join row of the task, then insert the new set."""
        task.categories.clear()
        self.db.flush()
        task.categories.extend(TaskCategory(category_id=cid) for cid in category_ids)

    def delete(self, task_id: int, user_id: int) -> None:
        """Delete a task together with its category links."""
        task = self.get_user_task(task_id, user_id)
        self.db.delete(task)
        self.db.commit()
        logger.info(f"Deleted task {task_id} for user {user_id}")
