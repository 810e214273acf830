"""CLI commands for workout-tracker."""

from .chat import chat
from .gym import gym
from .init import init
from .log import log
from .serve import serve
from .workouts import workouts

__all__ = [
    "chat",
    "gym",
    "init",
    "log",
    "serve",
    "workouts",
]
