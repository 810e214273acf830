"""Cache of rendered query results, dropped when a view goes stale."""

import asyncio
import logging
from typing import Any, Awaitable, Callable

from ..events import StaleViewNotifier, View

log = logging.getLogger(__name__)


class ViewCache:
    """Caches query results per view until a mutation marks them stale.

    Each view carries a generation number bumped on every invalidation.
    A load only stores its result if the generation it started under is
    still current, so a write that lands mid-load is never masked.
    """

    def __init__(self):
        self._entries: dict[tuple[View, str], Any] = {}
        self._generations: dict[View, int] = {}
        self._lock = asyncio.Lock()

    async def get_or_load(
        self,
        view: View,
        loader: Callable[[], Awaitable[Any]],
        key: str = "",
    ) -> Any:
        """Return the cached value for ``view``/``key``, loading it if needed.

        A failed load is not cached.
        """
        cache_key = (view, key)
        async with self._lock:
            if cache_key in self._entries:
                return self._entries[cache_key]

            generation = self._generations.get(view, 0)
            log.debug("Loading view %s (%s)", view.value, key or "-")
            value = await loader()
            if self._generations.get(view, 0) == generation:
                self._entries[cache_key] = value
            else:
                log.debug("View %s went stale during load; not caching", view.value)
            return value

    def invalidate(self, view: View) -> None:
        """Drop every cached entry for ``view``."""
        self._generations[view] = self._generations.get(view, 0) + 1
        for cache_key in [k for k in self._entries if k[0] == view]:
            del self._entries[cache_key]

    def attach(self, notifier: StaleViewNotifier) -> Callable[[], None]:
        """Invalidate automatically whenever ``notifier`` reports a stale view."""
        return notifier.subscribe(self.invalidate)

    def __contains__(self, view: View) -> bool:
        return any(k[0] == view for k in self._entries)
