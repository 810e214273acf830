"""Database engine setup and initialization."""

import logging
from pathlib import Path

import aiosqlite

from ..config import DATA_DIR

log = logging.getLogger(__name__)

# Known tables and their columns; SQL identifiers are only ever taken from here
TABLE_COLUMNS: dict[str, tuple[str, ...]] = {
    "workouts": ("id", "exercise", "sets", "reps", "weight", "notes", "created_at"),
    "gym_visits": ("id", "visited_date", "created_at"),
}


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "workout_tracker.db"


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    async with aiosqlite.connect(db_path) as db:
        # Logged workouts
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workouts (
                id TEXT PRIMARY KEY,
                exercise TEXT NOT NULL,
                sets INTEGER NOT NULL CHECK (typeof(sets) IN ('integer', 'real')),
                reps INTEGER NOT NULL CHECK (typeof(reps) IN ('integer', 'real')),
                weight REAL NOT NULL CHECK (typeof(weight) IN ('integer', 'real')),
                notes TEXT,
                created_at TEXT NOT NULL
            )
        """)

        # One row per attended day
        await db.execute("""
            CREATE TABLE IF NOT EXISTS gym_visits (
                id TEXT PRIMARY KEY,
                visited_date TEXT NOT NULL UNIQUE,
                created_at TEXT NOT NULL
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workouts_created_at
            ON workouts(created_at)
        """)

        await db.commit()

    log.debug("Database schema ready at %s", db_path)
