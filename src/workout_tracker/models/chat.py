"""Chat conversation models."""

import itertools
from dataclasses import dataclass
from enum import Enum

from .workout import WorkoutCreate

QUICK_ADD_NOTES = "Added from AI suggestion"


class Role(str, Enum):
    """Who sent a chat turn."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass
class ChatTurn:
    """One message in the conversation.

    Assistant turns start empty and grow as the response streams in.
    """

    id: str
    role: Role
    content: str = ""

    def to_message(self) -> dict:
        """Convert to the ``{role, content}`` shape sent as history."""
        return {"role": self.role.value, "content": self.content}


class TurnIdGenerator:
    """Hands out unique, increasing turn identifiers."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def next_id(self) -> str:
        return str(next(self._counter))


@dataclass
class WorkoutSuggestion:
    """An exercise recommendation parsed out of an assistant reply."""

    exercise: str
    sets: int
    reps: int
    weight: int

    def to_workout(self, notes: str = QUICK_ADD_NOTES) -> WorkoutCreate:
        """Convert to a workout ready for logging."""
        return WorkoutCreate(
            exercise=self.exercise,
            sets=self.sets,
            reps=self.reps,
            weight=self.weight,
            notes=notes,
        )

    def to_dict(self) -> dict:
        return {
            "exercise": self.exercise,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
        }
