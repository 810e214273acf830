"""Client-side chat conversation state."""

import logging
import time
from typing import Callable

import httpx

from ..models.chat import ChatTurn, Role, TurnIdGenerator, WorkoutSuggestion
from .suggestions import parse_suggestions

log = logging.getLogger(__name__)

ERROR_MESSAGE = "Sorry, I encountered an error. Please try again."

# Seconds a quick-add stays acknowledged as "saved"
SAVED_DURATION = 2.0

ChangeCallback = Callable[[ChatTurn], None]


class ChatSession:
    """Holds the turn list and talks to the chat endpoint.

    ``client`` must be an ``httpx.AsyncClient`` whose base URL is the web
    app. ``on_change`` is called with the affected turn after every change
    to the conversation, which is where a UI re-renders or scrolls.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        on_change: ChangeCallback | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.turns: list[ChatTurn] = []
        self.busy = False
        self._ids = TurnIdGenerator()
        self._on_change = on_change
        self._clock = clock
        self._saved_exercise: str | None = None
        self._saved_at = 0.0

    async def send(self, text: str) -> ChatTurn | None:
        """Send a message and stream the reply into a new assistant turn.

        Returns the assistant turn, or None when the input is blank or a
        reply is still streaming.
        """
        text = text.strip()
        if not text or self.busy:
            return None

        history = [turn.to_message() for turn in self.turns]

        self._append(ChatTurn(self._ids.next_id(), Role.USER, text))
        reply = self._append(ChatTurn(self._ids.next_id(), Role.ASSISTANT))
        self.busy = True

        try:
            async with self.client.stream(
                "POST", "/api/chat", json={"message": text, "history": history}
            ) as response:
                response.raise_for_status()
                async for chunk in response.aiter_text():
                    if chunk:
                        reply.content += chunk
                        self._changed(reply)
        except (httpx.HTTPError, httpx.StreamError) as e:
            log.warning("Chat error: %s", e)
            reply.content = ERROR_MESSAGE
            self._changed(reply)
        finally:
            self.busy = False

        return reply

    def suggestions(self, turn: ChatTurn) -> list[WorkoutSuggestion]:
        """Exercises offered for quick-add under an assistant turn."""
        if turn.role != Role.ASSISTANT:
            return []
        return parse_suggestions(turn.content)

    async def quick_add(self, suggestion: WorkoutSuggestion) -> bool:
        """Log a suggested exercise. Returns False if saving failed."""
        try:
            response = await self.client.post(
                "/api/workouts", json=suggestion.to_workout().to_dict()
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            log.error("Failed to save exercise %s: %s", suggestion.exercise, e)
            return False

        self._saved_exercise = suggestion.exercise
        self._saved_at = self._clock()
        return True

    def is_saved(self, exercise: str) -> bool:
        """Whether ``exercise`` was quick-added within the last two seconds.

        Keyed by name, so every suggestion sharing the name reports saved.
        """
        if self._saved_exercise != exercise:
            return False
        return self._clock() - self._saved_at < SAVED_DURATION

    def _append(self, turn: ChatTurn) -> ChatTurn:
        self.turns.append(turn)
        self._changed(turn)
        return turn

    def _changed(self, turn: ChatTurn) -> None:
        if self._on_change:
            self._on_change(turn)
