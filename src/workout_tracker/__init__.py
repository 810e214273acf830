"""workout-tracker: workout log, weekly gym attendance and an AI coach."""

__version__ = "0.1.0"
