"""Row-level data-access capability shared by every storage backend."""

from dataclasses import dataclass
from typing import Any, Protocol, Sequence, runtime_checkable

WORKOUTS_TABLE = "workouts"
GYM_VISITS_TABLE = "gym_visits"

FILTER_OPERATORS = ("eq", "gte", "lte")


class StoreError(Exception):
    """A storage backend rejected an operation.

    The message is the backend's own, passed through unchanged.
    """


@dataclass(frozen=True)
class Filter:
    """A single ``column <op> value`` condition."""

    column: str
    op: str
    value: Any

    def __post_init__(self):
        if self.op not in FILTER_OPERATORS:
            raise ValueError(f"Unsupported filter operator: {self.op}")

    @classmethod
    def eq(cls, column: str, value: Any) -> "Filter":
        return cls(column, "eq", value)

    @classmethod
    def gte(cls, column: str, value: Any) -> "Filter":
        return cls(column, "gte", value)

    @classmethod
    def lte(cls, column: str, value: Any) -> "Filter":
        return cls(column, "lte", value)


@runtime_checkable
class DataStore(Protocol):
    """Protocol for the relational store holding workouts and gym visits."""

    async def select(
        self,
        table: str,
        filters: Sequence[Filter] = (),
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[dict]:
        """Return matching rows as dictionaries."""
        ...

    async def insert(self, table: str, rows: Sequence[dict]) -> list[dict]:
        """Insert rows in one all-or-nothing call and return them as stored."""
        ...

    async def delete(self, table: str, filters: Sequence[Filter]) -> None:
        """Delete matching rows. Matching nothing is not an error."""
        ...
