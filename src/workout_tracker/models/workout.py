"""Workout and gym-visit data models."""

import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Mapping

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int_field(value: str | None) -> int | float:
    """Parse the leading integer of a form value.

    Mirrors how a browser form parses numbers: ``"10 reps"`` gives 10,
    ``"3.7"`` gives 3 and anything without a leading integer gives ``nan``.
    """
    match = _LEADING_INT.match(value or "")
    if not match:
        return math.nan
    return int(match.group(1))


def parse_float_field(value: str | None) -> float:
    """Parse the leading decimal number of a form value, ``nan`` if none."""
    match = _LEADING_FLOAT.match(value or "")
    if not match:
        return math.nan
    return float(match.group(1))


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse a stored timestamp into an aware UTC datetime."""
    if isinstance(value, datetime):
        dt = value
    else:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_weight(weight: float) -> str:
    """Format a weight the way it is displayed everywhere: 135, 137.5."""
    if isinstance(weight, float) and weight.is_integer():
        return str(int(weight))
    return str(weight)


@dataclass
class WorkoutCreate:
    """Fields supplied when logging a workout.

    ``id`` and ``created_at`` are assigned by the store on insert.
    Numeric fields are not validated here: a value that failed to parse
    is carried as ``nan`` and the store decides whether to accept it.
    """

    exercise: str
    sets: int
    reps: int
    weight: float
    notes: str | None = None

    def to_dict(self) -> dict:
        """Convert to a row for insertion."""
        return {
            "exercise": self.exercise,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WorkoutCreate":
        """Create from a JSON-style dictionary."""
        return cls(
            exercise=data["exercise"],
            sets=data["sets"],
            reps=data["reps"],
            weight=data["weight"],
            notes=data.get("notes") or None,
        )

    @classmethod
    def from_form(cls, form: Mapping[str, str | None]) -> "WorkoutCreate":
        """Create from raw form values (all strings)."""
        return cls(
            exercise=form.get("exercise") or "",
            sets=parse_int_field(form.get("sets")),
            reps=parse_int_field(form.get("reps")),
            weight=parse_float_field(form.get("weight")),
            notes=form.get("notes") or None,
        )


@dataclass
class Workout:
    """A logged workout entry as stored."""

    id: str
    exercise: str
    sets: int
    reps: int
    weight: float
    created_at: datetime
    notes: str | None = None

    @property
    def weight_display(self) -> str:
        return format_weight(self.weight)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "id": self.id,
            "exercise": self.exercise,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "notes": self.notes,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Workout":
        """Create from a store row."""
        return cls(
            id=str(row["id"]),
            exercise=row["exercise"],
            sets=row["sets"],
            reps=row["reps"],
            weight=float(row["weight"]),
            notes=row.get("notes"),
            created_at=parse_timestamp(row["created_at"]),
        )


@dataclass
class GymVisit:
    """Marks a day as attended. A missing row means the day was skipped."""

    id: str
    visited_date: date

    def to_dict(self) -> dict:
        return {"id": self.id, "visited_date": self.visited_date.isoformat()}

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "GymVisit":
        visited = row["visited_date"]
        if isinstance(visited, str):
            visited = date.fromisoformat(visited[:10])
        return cls(id=str(row["id"]), visited_date=visited)
