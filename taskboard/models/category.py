"""Category model."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from taskboard.database import Base
from taskboard.models.mixins import TimestampMixin


class Category(Base, TimestampMixin):
    """Named, coloured label a user attaches to tasks."""

    __tablename__ = "categories"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_category_user_name"),)

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    color = Column(String(20), nullable=False)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    user = relationship("User", back_populates="categories")
    task_links = relationship(
        "TaskCategory",
        back_populates="category",
        cascade="all, delete-orphan",
    )
