"""Hosted Supabase implementation of the data store."""

import asyncio
import logging
from datetime import date, datetime
from typing import Any, Callable, Sequence, TypeVar

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from .store import Filter, StoreError

log = logging.getLogger(__name__)

T = TypeVar("T")


def _to_wire(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


class SupabaseStore:
    """Data store backed by a Supabase (PostgREST) project.

    The Supabase client is synchronous, so every call runs in a worker
    thread to keep the event loop free.
    """

    def __init__(self, url: str, key: str, client: Client | None = None):
        self._client = client or create_client(url, key)

    async def select(
        self,
        table: str,
        filters: Sequence[Filter] = (),
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[dict]:
        """Return matching rows as dictionaries."""

        def run() -> list[dict]:
            query = self._client.table(table).select("*")
            query = self._apply_filters(query, filters)
            if order_by:
                query = query.order(order_by, desc=descending)
            if limit is not None:
                query = query.limit(limit)
            return query.execute().data or []

        return await self._run(run)

    async def insert(self, table: str, rows: Sequence[dict]) -> list[dict]:
        """Insert rows with one request; PostgREST applies them atomically."""
        if not rows:
            return []
        payload = [{k: _to_wire(v) for k, v in row.items()} for row in rows]

        def run() -> list[dict]:
            return self._client.table(table).insert(payload).execute().data or []

        return await self._run(run)

    async def delete(self, table: str, filters: Sequence[Filter]) -> None:
        """Delete matching rows."""
        if not filters:
            raise ValueError("Refusing to delete without a filter")

        def run() -> None:
            query = self._apply_filters(self._client.table(table).delete(), filters)
            query.execute()

        await self._run(run)

    def _apply_filters(self, query, filters: Sequence[Filter]):
        for f in filters:
            query = getattr(query, f.op)(f.column, _to_wire(f.value))
        return query

    async def _run(self, fn: Callable[[], T]) -> T:
        try:
            return await asyncio.to_thread(fn)
        except APIError as e:
            log.debug("Supabase rejected request: %s", e)
            raise StoreError(e.message or str(e)) from e
        except httpx.HTTPError as e:
            raise StoreError(str(e)) from e
