"""Local SQLite implementation of the data store."""

import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Sequence
from uuid import uuid4

import aiosqlite

from .engine import TABLE_COLUMNS, get_db_path
from .store import Filter, StoreError

log = logging.getLogger(__name__)

_SQL_OPERATORS = {"eq": "=", "gte": ">=", "lte": "<="}


def utc_timestamp(dt: datetime | None = None) -> str:
    """Serialize a datetime the way ``created_at`` is stored.

    Every stored timestamp is UTC with microseconds so that text
    comparison matches chronological order.
    """
    if dt is None:
        dt = datetime.now(timezone.utc)
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="microseconds")


def _to_db_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return utc_timestamp(value)
    if isinstance(value, date):
        return value.isoformat()
    return value


class SqliteStore:
    """Data store backed by a SQLite file."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def select(
        self,
        table: str,
        filters: Sequence[Filter] = (),
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[dict]:
        """Return matching rows as dictionaries."""
        columns = self._columns(table)
        sql = f"SELECT * FROM {table}"
        where, params = self._where(columns, filters)
        sql += where
        if order_by:
            self._check_column(columns, order_by)
            sql += f" ORDER BY {order_by} {'DESC' if descending else 'ASC'}"
        if limit is not None:
            sql += " LIMIT ?"
            params.append(limit)

        try:
            async with aiosqlite.connect(self.db_path) as db:
                db.row_factory = aiosqlite.Row
                cursor = await db.execute(sql, params)
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise StoreError(str(e)) from e
        return [dict(row) for row in rows]

    async def insert(self, table: str, rows: Sequence[dict]) -> list[dict]:
        """Insert all rows in a single transaction."""
        columns = self._columns(table)
        if not rows:
            return []

        stored = []
        for row in rows:
            record = {key: _to_db_value(value) for key, value in row.items()}
            record.setdefault("id", str(uuid4()))
            record.setdefault("created_at", utc_timestamp())
            for key in record:
                self._check_column(columns, key)
            stored.append(record)

        try:
            async with aiosqlite.connect(self.db_path) as db:
                try:
                    for record in stored:
                        names = ", ".join(record)
                        placeholders = ", ".join("?" for _ in record)
                        await db.execute(
                            f"INSERT INTO {table} ({names}) VALUES ({placeholders})",
                            tuple(record.values()),
                        )
                    await db.commit()
                except aiosqlite.Error:
                    await db.rollback()
                    raise
        except aiosqlite.Error as e:
            log.debug("Insert into %s rolled back: %s", table, e)
            raise StoreError(str(e)) from e
        return stored

    async def delete(self, table: str, filters: Sequence[Filter]) -> None:
        """Delete matching rows."""
        columns = self._columns(table)
        if not filters:
            raise ValueError("Refusing to delete without a filter")
        where, params = self._where(columns, filters)

        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute(f"DELETE FROM {table}{where}", params)
                await db.commit()
        except aiosqlite.Error as e:
            raise StoreError(str(e)) from e

    def _columns(self, table: str) -> tuple[str, ...]:
        if table not in TABLE_COLUMNS:
            raise ValueError(f"Unknown table: {table}")
        return TABLE_COLUMNS[table]

    def _check_column(self, columns: tuple[str, ...], column: str) -> None:
        if column not in columns:
            raise ValueError(f"Unknown column: {column}")

    def _where(
        self, columns: tuple[str, ...], filters: Sequence[Filter]
    ) -> tuple[str, list]:
        clauses = []
        params = []
        for f in filters:
            self._check_column(columns, f.column)
            clauses.append(f"{f.column} {_SQL_OPERATORS[f.op]} ?")
            params.append(_to_db_value(f.value))
        if not clauses:
            return "", params
        return " WHERE " + " AND ".join(clauses), params
