"""Runtime configuration for workout-tracker."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    """Settings read from the environment.

    The hosted store is used when both Supabase values are present;
    otherwise workouts live in a local SQLite file.
    """

    supabase_url: str | None = None
    supabase_anon_key: str | None = None
    groq_api_key: str | None = None
    database_path: Path | None = None
    log_level: str = "INFO"

    @property
    def uses_supabase(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        db_path = os.getenv("WORKOUT_TRACKER_DB")
        return cls(
            supabase_url=os.getenv("SUPABASE_URL") or None,
            supabase_anon_key=os.getenv("SUPABASE_ANON_KEY") or None,
            groq_api_key=os.getenv("GROQ_API_KEY") or None,
            database_path=Path(db_path) if db_path else None,
            log_level=os.getenv("WORKOUT_TRACKER_LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str | int = "INFO") -> None:
    """Configure root logging once for the CLI and web server."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
