"""Write operations. Each successful write marks the affected view stale."""

import logging
from datetime import date
from typing import Sequence

from ..db.store import GYM_VISITS_TABLE, WORKOUTS_TABLE, DataStore, Filter
from ..events import StaleViewNotifier, View
from ..models.workout import Workout, WorkoutCreate

log = logging.getLogger(__name__)


def _notify(notifier: StaleViewNotifier | None, view: View) -> None:
    if notifier is not None:
        notifier.mark_stale(view)


async def create_workout(
    store: DataStore,
    entry: WorkoutCreate,
    notifier: StaleViewNotifier | None = None,
) -> Workout:
    """Log a single workout.

    Raises:
        StoreError: The store rejected the row.
    """
    rows = await store.insert(WORKOUTS_TABLE, [entry.to_dict()])
    log.info("Logged workout: %s %sx%s", entry.exercise, entry.sets, entry.reps)
    _notify(notifier, View.WORKOUTS)
    return Workout.from_row(rows[0])


async def create_workouts(
    store: DataStore,
    entries: Sequence[WorkoutCreate],
    notifier: StaleViewNotifier | None = None,
) -> list[Workout]:
    """Log several workouts at once.

    The batch is all-or-nothing: if any row is rejected none are kept
    and a single StoreError is raised.
    """
    rows = await store.insert(WORKOUTS_TABLE, [entry.to_dict() for entry in entries])
    log.info("Logged %d workouts", len(rows))
    _notify(notifier, View.WORKOUTS)
    return [Workout.from_row(row) for row in rows]


async def delete_workout(
    store: DataStore,
    workout_id: str,
    notifier: StaleViewNotifier | None = None,
) -> None:
    """Delete a workout by ID. Deleting an unknown ID does nothing."""
    await store.delete(WORKOUTS_TABLE, [Filter.eq("id", workout_id)])
    log.info("Deleted workout %s", workout_id)
    _notify(notifier, View.WORKOUTS)


async def toggle_gym_visit(
    store: DataStore,
    visited_date: date,
    notifier: StaleViewNotifier | None = None,
) -> bool:
    """Flip attendance for a day.

    Deletes the visit if one exists, records one otherwise. This is a
    separate read and write, not a transaction.

    Returns:
        True if the day is marked as attended afterwards
    """
    existing = await store.select(
        GYM_VISITS_TABLE,
        filters=[Filter.eq("visited_date", visited_date)],
        limit=1,
    )

    if existing:
        await store.delete(GYM_VISITS_TABLE, [Filter.eq("id", existing[0]["id"])])
        attended = False
    else:
        await store.insert(GYM_VISITS_TABLE, [{"visited_date": visited_date}])
        attended = True

    log.info(
        "Gym visit on %s %s", visited_date.isoformat(), "recorded" if attended else "removed"
    )
    _notify(notifier, View.GYM_VISITS)
    return attended
