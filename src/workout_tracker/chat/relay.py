"""Chat endpoint protocol: request parsing, context assembly and relay."""

import logging
from typing import Any, AsyncGenerator, AsyncIterator

from ..db.store import DataStore
from ..services.queries import RECENT_WINDOW_DAYS, list_recent_workouts
from .model import ChatModel
from .prompts import build_system_prompt

log = logging.getLogger(__name__)


class ChatRequestError(ValueError):
    """The chat request body is malformed."""


def parse_chat_request(body: Any) -> tuple[str, list[dict]]:
    """Validate a ``{message, history}`` body.

    Returns:
        The message and the history as ``{role, content}`` dicts

    Raises:
        ChatRequestError: ``message`` is missing or not text, or the
            history is not a list of turns
    """
    if not isinstance(body, dict):
        raise ChatRequestError("Message is required")

    message = body.get("message")
    if not message or not isinstance(message, str):
        raise ChatRequestError("Message is required")

    history = body.get("history") or []
    if not isinstance(history, list) or not all(isinstance(t, dict) for t in history):
        raise ChatRequestError("History must be a list of messages")

    return message, [
        {"role": turn.get("role"), "content": turn.get("content")} for turn in history
    ]


def build_messages(system_prompt: str, history: list[dict], message: str) -> list[dict]:
    """System prompt, prior turns unchanged, then the new user message."""
    return [
        {"role": "system", "content": system_prompt},
        *history,
        {"role": "user", "content": message},
    ]


async def open_chat_stream(
    store: DataStore,
    model: ChatModel,
    message: str,
    history: list[dict],
) -> AsyncGenerator[str, None]:
    """Fetch context and start the model stream.

    Any exception raised here happens before a response is started.
    """
    recent = await list_recent_workouts(store, RECENT_WINDOW_DAYS)
    messages = build_messages(build_system_prompt(recent), history, message)
    return await model.open_stream(messages)


async def relay(deltas: AsyncGenerator[str, None]) -> AsyncIterator[bytes]:
    """Forward each text delta as soon as it arrives.

    The model stream is closed when the relay ends for any reason,
    including the client going away mid-response.
    """
    try:
        async for text in deltas:
            yield text.encode("utf-8")
    except Exception:
        log.exception("Chat stream aborted")
        raise
    finally:
        await deltas.aclose()
