"""AI coach chat: prompt, model client, relay and client session."""

from .model import ChatModel, ChatModelError, GroqChatModel
from .relay import ChatRequestError, open_chat_stream, parse_chat_request, relay
from .session import ChatSession
from .suggestions import parse_suggestions

__all__ = [
    "ChatModel",
    "ChatModelError",
    "ChatRequestError",
    "ChatSession",
    "GroqChatModel",
    "open_chat_stream",
    "parse_chat_request",
    "parse_suggestions",
    "relay",
]
