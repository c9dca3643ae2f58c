"""Dashboard statistics for a user's tasks."""

from collections import Counter
from collections.abc import Iterable
from datetime import UTC, date, datetime, time, timedelta

from sqlalchemy.orm import Session

from taskboard.models.task import Task
from taskboard.services.category_service import CategoryService

WEEK_DAYS = 7


def completion_rate(completed: int, total: int) -> int:
    """Percentage of completed tasks, rounded half up; 0 for no tasks."""
    if total <= 0:
        return 0
    # floor(100 * completed / total + 0.5) in integer arithmetic
    return (200 * completed + total) // (2 * total)


def local_date(value: datetime) -> date:
    """Server-local calendar date of a timestamp. Naive values are UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone().date()


def local_midnight(day: date) -> datetime:
    """Start of ``day`` in server-local time, as aware UTC."""
    return datetime.combine(day, time.min).astimezone().astimezone(UTC)


def weekly_buckets(created: Iterable[datetime], today: date) -> list[dict]:
    """Count timestamps per local day for the 7 days ending ``today``.

    Returns entries oldest first; days without tasks are present with 0.
    """
    days = [today - timedelta(days=offset) for offset in range(WEEK_DAYS - 1, -1, -1)]
    counts = Counter(local_date(ts) for ts in created)
    return [{"date": day.isoformat(), "count": counts.get(day, 0)} for day in days]


class StatsService:
    """Aggregates counts, weekly activity and category usage."""

    def __init__(self, db: Session):
        self.db = db
        self.categories = CategoryService(db)

    def get_stats(self, user_id: int, now: datetime | None = None) -> dict:
        now = now or datetime.now(UTC)
        base = self.db.query(Task).filter(Task.user_id == user_id)

        total = base.count()
        completed = base.filter(Task.completed.is_(True)).count()
        overdue = base.filter(
            Task.completed.is_(False),
            Task.due_date.is_not(None),
            Task.due_date < now,
        ).count()

        today = local_date(now)
        window_start = local_midnight(today - timedelta(days=WEEK_DAYS - 1))
        created = [
            created_at
            for (created_at,) in self.db.query(Task.created_at)
            .filter(Task.user_id == user_id, Task.created_at >= window_start)
            .all()
        ]
        weekly_data = weekly_buckets(created, today)

        category_stats = [
            {"name": category.name, "color": category.color, "count": count}
            for category, count in self.categories.list_with_counts(user_id)
        ]

        return {
            "stats": {
                "total": total,
                "completed": completed,
                "pending": total - completed,
                "overdue": overdue,
                "completion_rate": completion_rate(completed, total),
            },
            "weekly_data": weekly_data,
            "category_stats": category_stats,
        }
