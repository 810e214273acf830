"""Database layer for workout-tracker."""

from ..config import Settings
from .engine import get_db_path, init_db
from .sqlite_store import SqliteStore
from .store import (
    GYM_VISITS_TABLE,
    WORKOUTS_TABLE,
    DataStore,
    Filter,
    StoreError,
)


def create_store(settings: Settings) -> DataStore:
    """Pick the storage backend for the given settings."""
    if settings.uses_supabase:
        from .supabase_store import SupabaseStore

        return SupabaseStore(settings.supabase_url, settings.supabase_anon_key)
    return SqliteStore(settings.database_path or get_db_path())


__all__ = [
    "create_store",
    "DataStore",
    "Filter",
    "get_db_path",
    "GYM_VISITS_TABLE",
    "init_db",
    "SqliteStore",
    "StoreError",
    "WORKOUTS_TABLE",
]
