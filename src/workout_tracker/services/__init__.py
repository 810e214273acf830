"""Query and mutation services."""

from .mutations import create_workout, create_workouts, delete_workout, toggle_gym_visit
from .queries import (
    WeekDay,
    list_recent_workouts,
    list_weekly_gym_visits,
    list_workouts,
    week_dates,
    week_window,
)

__all__ = [
    "create_workout",
    "create_workouts",
    "delete_workout",
    "list_recent_workouts",
    "list_weekly_gym_visits",
    "list_workouts",
    "toggle_gym_visit",
    "week_dates",
    "week_window",
    "WeekDay",
]
