"""Task model and its category join table."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from taskboard.database import Base
from taskboard.models.mixins import TimestampMixin


class Task(Base, TimestampMixin):
    """Task owned by a single user."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    completed = Column(Boolean, default=False, nullable=False, index=True)
    due_date = Column(DateTime(timezone=True), nullable=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    user = relationship("User", back_populates="tasks")
    categories = relationship(
        "TaskCategory",
        back_populates="task",
        cascade="all, delete-orphan",
    )


class TaskCategory(Base):
    """Link between a task and one of its categories."""

    __tablename__ = "task_categories"

    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), primary_key=True)
    category_id = Column(
        Integer, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True, index=True
    )

    # Relationships
    task = relationship("Task", back_populates="categories")
    category = relationship("Category", back_populates="task_links")
