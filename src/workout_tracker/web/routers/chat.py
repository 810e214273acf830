"""AI coach chat routes."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, StreamingResponse

from ...chat.relay import ChatRequestError, open_chat_stream, parse_chat_request, relay
from ...chat.suggestions import parse_suggestions
from ..dependencies import get_model, get_store

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.post("")
async def chat(request: Request):
    """Stream the coach's reply as plain text.

    Responds 400 for a missing message and 500 if the workout history
    or the model cannot be reached before streaming starts.
    """
    try:
        body = await request.json()
    except ValueError:
        body = None

    try:
        message, history = parse_chat_request(body)
    except ChatRequestError as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    try:
        deltas = await open_chat_stream(get_store(request), get_model(request), message, history)
    except Exception:
        log.exception("Chat API error")
        return JSONResponse({"error": "Failed to generate response"}, status_code=500)

    return StreamingResponse(relay(deltas), media_type="text/plain; charset=utf-8")


@router.post("/suggestions")
async def suggestions(request: Request):
    """Exercises in an assistant reply that can be quick-added."""
    try:
        body = await request.json()
    except ValueError:
        body = None

    text = body.get("text") if isinstance(body, dict) else None
    if not isinstance(text, str):
        return JSONResponse({"error": "Text is required"}, status_code=400)

    return {"suggestions": [s.to_dict() for s in parse_suggestions(text)]}
