"""Task listing queries: filter coercion, shared predicate, page + count."""

import math
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from taskboard.models.task import Task, TaskCategory

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# Keeps (page - 1) * MAX_LIMIT well inside a signed 64-bit OFFSET
MAX_PAGE = 10**9
MAX_ID = 2**63 - 1

STATUSES = ("all", "completed", "pending")
SORT_COLUMNS = {
    "createdAt": Task.created_at,
    "title": Task.title,
    "dueDate": Task.due_date,
}
ORDERS = ("asc", "desc")


def _positive_int(value: Any, default: int, maximum: int) -> int:
    """Parse a positive integer, falling back to ``default`` and capped at ``maximum``."""
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    if number <= 0:
        return default
    return min(number, maximum)


def _optional_int(value: Any) -> int | None:
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    # Ids outside the column range cannot match anything
    return number if -MAX_ID <= number <= MAX_ID else None


def _truthy(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1")


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass(frozen=True)
class TaskFilters:
    """Coerced filter specification for a task listing."""

    status: str = "all"
    search: str | None = None
    category_id: int | None = None
    overdue: bool = False
    sort_by: str = "createdAt"
    order: str = "desc"
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(
        cls,
        status: str | None = None,
        search: str | None = None,
        category_id: str | None = None,
        overdue: str | None = None,
        sort_by: str | None = None,
        order: str | None = None,
        page: str | None = None,
        limit: str | None = None,
    ) -> "TaskFilters":
        """Build filters from raw query-string values.

        Malformed values never fail the request: they fall back to defaults
        (page=1, limit=10, no status/category filter, createdAt desc). Oversized
        page and limit values are capped at MAX_PAGE and MAX_LIMIT.
        """
        if search is not None and not search.strip():
            search = None
        return cls(
            status=status if status in STATUSES else "all",
            search=search,
            category_id=_optional_int(category_id) if category_id is not None else None,
            overdue=_truthy(overdue) if overdue is not None else False,
            sort_by=sort_by if sort_by in SORT_COLUMNS else "createdAt",
            order=order if order in ORDERS else "desc",
            page=_positive_int(page, DEFAULT_PAGE, MAX_PAGE),
            limit=_positive_int(limit, DEFAULT_LIMIT, MAX_LIMIT),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class TaskPage:
    """One page of tasks plus the total matching the same filters."""

    tasks: list[Task]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)


def build_predicates(user_id: int, filters: TaskFilters, now: datetime | None = None) -> list:
    """Build the WHERE clauses shared by the page query and the count query."""
    now = now or datetime.now(UTC)
    predicates = [Task.user_id == user_id]

    completed: bool | None = None
    if filters.status == "completed":
        completed = True
    elif filters.status == "pending":
        completed = False

    if filters.overdue:
        predicates.append(Task.due_date.is_not(None))
        predicates.append(Task.due_date < now)
        # Overdue wins over status
        completed = False

    if completed is not None:
        predicates.append(Task.completed.is_(completed))

    if filters.search:
        pattern = f"%{escape_like(filters.search)}%"
        predicates.append(
            or_(
                Task.title.ilike(pattern, escape="\\"),
                Task.description.ilike(pattern, escape="\\"),
            )
        )

    if filters.category_id is not None:
        predicates.append(Task.categories.any(TaskCategory.category_id == filters.category_id))

    return predicates


def list_tasks(db: Session, user_id: int, filters: TaskFilters) -> TaskPage:
    """Run the page query and the count query for ``filters``."""
    predicates = build_predicates(user_id, filters)

    sort_column = SORT_COLUMNS[filters.sort_by]
    if filters.order == "asc":
        ordering = (sort_column.asc(), Task.id.asc())
    else:
        ordering = (sort_column.desc(), Task.id.desc())

    tasks = (
        db.query(Task)
        .options(selectinload(Task.categories).selectinload(TaskCategory.category))
        .filter(*predicates)
        .order_by(*ordering)
        .offset(filters.offset)
        .limit(filters.limit)
        .all()
    )
    total = db.query(Task).filter(*predicates).count()

    return TaskPage(tasks=tasks, total=total, page=filters.page, limit=filters.limit)
