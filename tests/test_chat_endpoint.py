"""Tests for the /api/chat endpoints."""

from datetime import datetime, timedelta, timezone

import pytest

from workout_tracker.chat.model import ChatModelError, GroqChatModel
from workout_tracker.chat.prompts import NO_RECENT_WORKOUTS, SYSTEM_PROMPT
from workout_tracker.db import WORKOUTS_TABLE


class TestChatEndpoint:
    """Tests for POST /api/chat."""

    @pytest.mark.asyncio
    async def test_streams_reply(self, client, fake_model):
        response = await client.post("/api/chat", json={"message": "Plan my leg day"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Hello"

    @pytest.mark.asyncio
    async def test_message_assembly(self, client, fake_model):
        history = [
            {"role": "user", "content": "Hi"},
            {"role": "assistant", "content": "Hey! What are we training?"},
        ]

        await client.post("/api/chat", json={"message": "Legs", "history": history})

        messages = fake_model.calls[0]
        assert messages[0]["role"] == "system"
        assert messages[0]["content"] == SYSTEM_PROMPT + "\n\n" + NO_RECENT_WORKOUTS
        assert messages[1:3] == history
        assert messages[3] == {"role": "user", "content": "Legs"}

    @pytest.mark.asyncio
    async def test_context_includes_recent_workouts_only(self, client, fake_model, store):
        now = datetime.now(timezone.utc)
        await store.insert(
            WORKOUTS_TABLE,
            [
                {"exercise": "Squat", "sets": 5, "reps": 5, "weight": 225,
                 "notes": "new PR", "created_at": now - timedelta(days=2)},
                {"exercise": "Old Curl", "sets": 3, "reps": 12, "weight": 30,
                 "created_at": now - timedelta(days=20)},
            ],
        )

        await client.post("/api/chat", json={"message": "What next?"})

        system = fake_model.calls[0][0]["content"]
        assert "Recent workouts (last 2 weeks):" in system
        assert "Squat - 5x5 @ 225lbs (new PR)" in system
        assert "Old Curl" not in system

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [{}, {"message": ""}, {"message": 123}, {"history": []}],
    )
    async def test_message_required(self, client, fake_model, body):
        response = await client.post("/api/chat", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Message is required"}
        assert fake_model.calls == []

    @pytest.mark.asyncio
    async def test_invalid_json(self, client):
        response = await client.post(
            "/api/chat", content=b"not json", headers={"content-type": "application/json"}
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_bad_history(self, client):
        response = await client.post("/api/chat", json={"message": "hi", "history": "x"})
        assert response.status_code == 400
        assert response.json() == {"error": "History must be a list of messages"}

    @pytest.mark.asyncio
    async def test_model_failure(self, make_client, model_factory):
        model = model_factory(error=ChatModelError("rate limited"))
        async with make_client(model=model) as client:
            response = await client.post("/api/chat", json={"message": "hi"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate response"}

    @pytest.mark.asyncio
    async def test_missing_api_key(self, make_client):
        async with make_client(model=GroqChatModel(None)) as client:
            response = await client.post("/api/chat", json={"message": "hi"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate response"}

    @pytest.mark.asyncio
    async def test_context_failure(self, make_client, model_factory, failing_store):
        model = model_factory(["never sent"])
        async with make_client(model=model, app_store=failing_store) as client:
            response = await client.post("/api/chat", json={"message": "hi"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate response"}
        assert model.calls == []


class TestSuggestionsEndpoint:
    """Tests for POST /api/chat/suggestions."""

    @pytest.mark.asyncio
    async def test_extracts_suggestions(self, client):
        text = "**Squat**\n- Sets: 3\n- Reps: 10\n- Weight: 135.5"

        response = await client.post("/api/chat/suggestions", json={"text": text})

        assert response.status_code == 200
        assert response.json() == {
            "suggestions": [{"exercise": "Squat", "sets": 3, "reps": 10, "weight": 135}]
        }

    @pytest.mark.asyncio
    async def test_text_required(self, client):
        response = await client.post("/api/chat/suggestions", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Text is required"}
