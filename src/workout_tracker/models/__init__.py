"""Data models for workout-tracker."""

from .chat import ChatTurn, Role, TurnIdGenerator, WorkoutSuggestion
from .workout import GymVisit, Workout, WorkoutCreate

__all__ = [
    "ChatTurn",
    "GymVisit",
    "Role",
    "TurnIdGenerator",
    "Workout",
    "WorkoutCreate",
    "WorkoutSuggestion",
]
