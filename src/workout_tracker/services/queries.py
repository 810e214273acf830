"""Read-only queries over workouts and gym visits."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from ..db.store import GYM_VISITS_TABLE, WORKOUTS_TABLE, DataStore, Filter
from ..models.workout import GymVisit, Workout

DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# Days of history handed to the chat model
RECENT_WINDOW_DAYS = 14


@dataclass
class WeekDay:
    """One cell of the weekly attendance grid."""

    name: str
    date: date
    is_today: bool


async def list_workouts(store: DataStore) -> list[Workout]:
    """All workouts, newest first."""
    rows = await store.select(WORKOUTS_TABLE, order_by="created_at", descending=True)
    return [Workout.from_row(row) for row in rows]


async def list_recent_workouts(
    store: DataStore,
    window_days: int = RECENT_WINDOW_DAYS,
    now: datetime | None = None,
) -> list[Workout]:
    """Workouts created in the last ``window_days`` days, newest first."""
    if now is None:
        now = datetime.now(timezone.utc)
    since = now - timedelta(days=window_days)
    rows = await store.select(
        WORKOUTS_TABLE,
        filters=[Filter.gte("created_at", since)],
        order_by="created_at",
        descending=True,
    )
    return [Workout.from_row(row) for row in rows]


def week_window(now: datetime | None = None) -> tuple[datetime, datetime]:
    """Monday 00:00:00 through Sunday 23:59:59.999 of the week containing ``now``."""
    if now is None:
        now = datetime.now()
    # weekday() already counts Monday as 0 and Sunday as 6
    days_from_monday = now.weekday()
    monday = datetime.combine(
        now.date() - timedelta(days=days_from_monday), time.min, tzinfo=now.tzinfo
    )
    sunday = datetime.combine(
        monday.date() + timedelta(days=6),
        time(23, 59, 59, 999000),
        tzinfo=now.tzinfo,
    )
    return monday, sunday


def week_dates(now: datetime | None = None) -> list[WeekDay]:
    """The seven days of the current week, Monday first."""
    if now is None:
        now = datetime.now()
    monday, _ = week_window(now)
    today = now.date()
    days = []
    for index, name in enumerate(DAY_NAMES):
        day = monday.date() + timedelta(days=index)
        days.append(WeekDay(name=name, date=day, is_today=day == today))
    return days


async def list_weekly_gym_visits(
    store: DataStore, now: datetime | None = None
) -> list[GymVisit]:
    """Gym visits falling inside the current Monday-Sunday week."""
    monday, sunday = week_window(now)
    rows = await store.select(
        GYM_VISITS_TABLE,
        filters=[
            Filter.gte("visited_date", monday.date()),
            Filter.lte("visited_date", sunday.date()),
        ],
        order_by="visited_date",
    )
    return [GymVisit.from_row(row) for row in rows]
