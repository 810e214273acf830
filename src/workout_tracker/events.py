"""Stale-view notifications sent by the mutation layer."""

import logging
from enum import Enum
from typing import Callable

log = logging.getLogger(__name__)


class View(str, Enum):
    """Cached views that a write can make stale."""

    WORKOUTS = "workouts"
    GYM_VISITS = "gym_visits"


StaleListener = Callable[[View], None]


class StaleViewNotifier:
    """Fan-out of "this view is stale, refetch" events.

    Listeners are plain callables invoked synchronously, in subscription
    order, every time a view is marked stale.
    """

    def __init__(self):
        self._listeners: list[StaleListener] = []

    def subscribe(self, listener: StaleListener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def mark_stale(self, view: View) -> None:
        """Tell every listener that ``view`` must be refetched."""
        log.debug("View %s marked stale", view.value)
        for listener in list(self._listeners):
            listener(view)
