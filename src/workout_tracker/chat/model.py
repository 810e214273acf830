"""Chat-completion model client.

Groq serves Llama models behind an OpenAI-compatible API, so the
``openai`` async client is pointed at Groq's base URL.
"""

import logging
from typing import AsyncGenerator, Protocol

from openai import AsyncOpenAI

log = logging.getLogger(__name__)

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
CHAT_MODEL = "llama-3.3-70b-versatile"
MAX_TOKENS = 1024


class ChatModelError(Exception):
    """The chat model could not be invoked."""


class ChatModel(Protocol):
    """Protocol for a streaming chat-completion model."""

    async def open_stream(self, messages: list[dict]) -> AsyncGenerator[str, None]:
        """Send the request and return an iterator over text deltas.

        Failures to start the completion are raised here, before any
        text is produced.
        """
        ...


class GroqChatModel:
    """Streams completions from Groq."""

    def __init__(
        self,
        api_key: str | None,
        model: str = CHAT_MODEL,
        max_tokens: int = MAX_TOKENS,
        client: AsyncOpenAI | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise ChatModelError("GROQ_API_KEY is not set")
            self._client = AsyncOpenAI(api_key=self.api_key, base_url=GROQ_BASE_URL)
        return self._client

    async def open_stream(self, messages: list[dict]) -> AsyncGenerator[str, None]:
        client = self._get_client()
        log.debug("Requesting %s completion with %d messages", self.model, len(messages))
        stream = await client.chat.completions.create(
            model=self.model,
            messages=messages,
            max_tokens=self.max_tokens,
            stream=True,
        )
        return self._deltas(stream)

    async def _deltas(self, stream) -> AsyncGenerator[str, None]:
        try:
            async for chunk in stream:
                if not chunk.choices:
                    continue
                text = chunk.choices[0].delta.content
                if text:
                    yield text
        finally:
            # Releases the HTTP connection if the consumer stops early
            await stream.close()
