"""Tests for the web pages and JSON API."""

from datetime import date, datetime, timedelta, timezone

import pytest

from workout_tracker.events import View
from workout_tracker.services import list_workouts, week_window
from workout_tracker.web.app import format_history_date

FORM = {"exercise": "Bench Press", "sets": "3", "reps": "10", "weight": "135", "notes": ""}


class TestHomePage:
    """Tests for the server-rendered page."""

    @pytest.mark.asyncio
    async def test_empty_state(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert "No workouts logged yet" in response.text
        assert "0 / 7 days this week" in response.text
        assert "AI Workout Planner" in response.text

    @pytest.mark.asyncio
    async def test_log_workout_from_form(self, client, store):
        response = await client.post("/workouts", data={**FORM, "notes": "Felt strong"})

        assert response.status_code == 302
        assert response.headers["location"] == "/"

        workouts = await list_workouts(store)
        assert workouts[0].exercise == "Bench Press"
        assert workouts[0].notes == "Felt strong"

        page = await client.get("/")
        assert "Bench Press" in page.text
        assert "135 lbs" in page.text
        assert "Felt strong" in page.text

    @pytest.mark.asyncio
    async def test_empty_notes_stored_as_none(self, client, store):
        await client.post("/workouts", data=FORM)

        workouts = await list_workouts(store)
        assert workouts[0].notes is None

    @pytest.mark.asyncio
    async def test_unparseable_number_shows_error(self, client, store):
        response = await client.post("/workouts", data={**FORM, "sets": "lots"})

        assert response.status_code == 400
        assert "NOT NULL" in response.text
        assert await list_workouts(store) == []

    @pytest.mark.asyncio
    async def test_delete_from_table(self, client, store):
        await client.post("/workouts", data=FORM)
        workout = (await list_workouts(store))[0]

        response = await client.post(f"/workouts/{workout.id}/delete")

        assert response.status_code == 302
        assert await list_workouts(store) == []

    @pytest.mark.asyncio
    async def test_toggle_day(self, client):
        today = date.today().isoformat()

        response = await client.post("/gym/toggle", data={"date": today})
        assert response.status_code == 302

        page = await client.get("/")
        assert "1 / 7 days this week" in page.text

        await client.post("/gym/toggle", data={"date": today})
        page = await client.get("/")
        assert "0 / 7 days this week" in page.text

    @pytest.mark.asyncio
    async def test_toggle_invalid_date(self, client):
        response = await client.post("/gym/toggle", data={"date": "someday"})

        assert response.status_code == 400
        assert "Invalid date: someday" in response.text

    @pytest.mark.asyncio
    async def test_store_failure(self, make_client, failing_store):
        async with make_client(app_store=failing_store) as client:
            response = await client.get("/")

        assert response.status_code == 500
        assert response.json() == {"error": "connection refused"}


class TestViewCache:
    """Tests that writes invalidate what the page shows."""

    @pytest.mark.asyncio
    async def test_write_invalidates_cached_history(self, app, client):
        cache = app.state.view_cache

        await client.get("/")
        assert View.WORKOUTS in cache
        assert View.GYM_VISITS in cache

        await client.post("/workouts", data=FORM)
        assert View.WORKOUTS not in cache
        assert View.GYM_VISITS in cache

        await client.post("/gym/toggle", data={"date": date.today().isoformat()})
        assert View.GYM_VISITS not in cache

    @pytest.mark.asyncio
    async def test_api_writes_invalidate_too(self, app, client):
        await client.get("/")

        await client.post(
            "/api/workouts", json={"exercise": "Row", "sets": 3, "reps": 8, "weight": 95}
        )

        assert View.WORKOUTS not in app.state.view_cache
        page = await client.get("/")
        assert "Row" in page.text


class TestWorkoutsApi:
    """Tests for /api/workouts."""

    @pytest.mark.asyncio
    async def test_create_and_list(self, client):
        response = await client.post(
            "/api/workouts",
            json={"exercise": "Squat", "sets": 5, "reps": 5, "weight": 225, "notes": "belt"},
        )

        assert response.status_code == 201
        created = response.json()["workout"]
        assert created["id"]
        assert created["notes"] == "belt"

        listing = await client.get("/api/workouts")
        assert [w["id"] for w in listing.json()["workouts"]] == [created["id"]]

    @pytest.mark.asyncio
    async def test_missing_field(self, client):
        response = await client.post("/api/workouts", json={"exercise": "Squat"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing field: sets"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field, value",
        [("weight", "heavy"), ("sets", "3"), ("reps", None), ("reps", True), ("exercise", 5)],
    )
    async def test_wrong_types_rejected(self, client, store, field, value):
        body = {"exercise": "Squat", "sets": 3, "reps": 5, "weight": 100}
        body[field] = value

        response = await client.post("/api/workouts", json=body)

        assert response.status_code == 400
        assert field in response.json()["error"]
        assert await list_workouts(store) == []

        # Reads keep working afterwards
        listing = await client.get("/api/workouts")
        assert listing.json() == {"workouts": []}

    @pytest.mark.asyncio
    async def test_not_an_object(self, client):
        response = await client.post("/api/workouts", json=["Squat"])
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_batch(self, client):
        rows = [
            {"exercise": "Squat", "sets": 5, "reps": 5, "weight": 225},
            {"exercise": "Lunge", "sets": 3, "reps": 12, "weight": 40},
        ]

        response = await client.post("/api/workouts/batch", json={"workouts": rows})

        assert response.status_code == 201
        assert [w["exercise"] for w in response.json()["workouts"]] == ["Squat", "Lunge"]

    @pytest.mark.asyncio
    async def test_batch_all_or_nothing(self, client, store):
        rows = [
            {"exercise": "Squat", "sets": 5, "reps": 5, "weight": 225},
            {"exercise": "Lunge", "sets": None, "reps": 12, "weight": 40},
        ]

        response = await client.post("/api/workouts/batch", json=rows)

        assert response.status_code == 400
        assert response.json() == {"error": "sets must be a number"}
        assert await list_workouts(store) == []

    @pytest.mark.asyncio
    async def test_batch_requires_list(self, client):
        response = await client.post("/api/workouts/batch", json={"exercise": "Squat"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete(self, client, store):
        created = await client.post(
            "/api/workouts", json={"exercise": "Row", "sets": 3, "reps": 8, "weight": 95}
        )
        workout_id = created.json()["workout"]["id"]

        response = await client.delete(f"/api/workouts/{workout_id}")

        assert response.json() == {"status": "deleted", "id": workout_id}
        assert await list_workouts(store) == []


class TestGymVisitsApi:
    """Tests for /api/gym-visits."""

    @pytest.mark.asyncio
    async def test_toggle_and_list(self, client):
        today = date.today().isoformat()

        response = await client.post(f"/api/gym-visits/{today}/toggle")
        assert response.json() == {"date": today, "attended": True}

        listing = (await client.get("/api/gym-visits")).json()
        monday, sunday = week_window()
        assert listing["week_start"] == monday.date().isoformat()
        assert listing["week_end"] == sunday.date().isoformat()
        assert [v["visited_date"] for v in listing["visits"]] == [today]

        response = await client.post(f"/api/gym-visits/{today}/toggle")
        assert response.json() == {"date": today, "attended": False}

    @pytest.mark.asyncio
    async def test_other_weeks_not_listed(self, client):
        last_month = (date.today() - timedelta(days=30)).isoformat()

        await client.post(f"/api/gym-visits/{last_month}/toggle")

        listing = (await client.get("/api/gym-visits")).json()
        assert listing["visits"] == []

    @pytest.mark.asyncio
    async def test_invalid_date(self, client):
        response = await client.post("/api/gym-visits/not-a-date/toggle")
        assert response.status_code == 422


class TestMisc:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.json()["status"] == "healthy"

    def test_history_date_format(self):
        value = datetime(2026, 1, 5, 14, 30, tzinfo=timezone.utc)
        local = value.astimezone()
        formatted = format_history_date(value)

        assert formatted.startswith(f"{local:%b} {local.day}, ")
        assert formatted.endswith(f":{local:%M} {local:%p}")
