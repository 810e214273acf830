"""Integration tests against the hosted store and chat model.

These tests require API access and are meant to verify the full flow works.
Each test is skipped unless the matching credentials are set in the environment.
"""

from datetime import date

import pytest

from workout_tracker.chat.model import GroqChatModel
from workout_tracker.models.workout import WorkoutCreate
from workout_tracker.services import (
    create_workout,
    delete_workout,
    list_recent_workouts,
    list_weekly_gym_visits,
    toggle_gym_visit,
)


class TestGroqIntegration:
    @pytest.mark.asyncio
    async def test_streams_completion(self, groq_api_key):
        model = GroqChatModel(groq_api_key, max_tokens=32)

        deltas = await model.open_stream(
            [{"role": "user", "content": "Reply with the single word: ready"}]
        )
        text = "".join([delta async for delta in deltas])

        assert text.strip()


class TestSupabaseIntegration:
    @pytest.mark.asyncio
    async def test_workout_roundtrip(self, supabase_store):
        entry = WorkoutCreate(
            exercise="Integration Test Squat", sets=1, reps=1, weight=45, notes="delete me"
        )

        created = await create_workout(supabase_store, entry)
        try:
            recent = await list_recent_workouts(supabase_store)
            assert created.id in [w.id for w in recent]
        finally:
            await delete_workout(supabase_store, created.id)

        recent = await list_recent_workouts(supabase_store)
        assert created.id not in [w.id for w in recent]

    @pytest.mark.asyncio
    async def test_toggle_restores_state(self, supabase_store):
        today = date.today()
        before = today in {v.visited_date for v in await list_weekly_gym_visits(supabase_store)}

        first = await toggle_gym_visit(supabase_store, today)
        second = await toggle_gym_visit(supabase_store, today)

        assert first is not before
        assert second is before
        after = today in {v.visited_date for v in await list_weekly_gym_visits(supabase_store)}
        assert after is before
