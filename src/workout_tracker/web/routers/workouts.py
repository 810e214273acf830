"""Workout JSON API routes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ...models.workout import WorkoutCreate
from ...services import create_workout, create_workouts, delete_workout, list_workouts
from ..dependencies import get_notifier, get_store

router = APIRouter(prefix="/api/workouts", tags=["workouts"])


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_entry(data) -> WorkoutCreate:
    if not isinstance(data, dict):
        raise ValueError("Workout must be an object")
    try:
        entry = WorkoutCreate.from_dict(data)
    except KeyError as e:
        raise ValueError(f"Missing field: {e.args[0]}") from e

    if not isinstance(entry.exercise, str):
        raise ValueError("exercise must be a string")
    for field in ("sets", "reps", "weight"):
        if not _is_number(getattr(entry, field)):
            raise ValueError(f"{field} must be a number")
    return entry


async def _read_json(request: Request):
    try:
        return await request.json()
    except ValueError:
        return None


@router.get("")
async def get_workouts(request: Request):
    """All workouts, newest first."""
    workouts = await list_workouts(get_store(request))
    return {"workouts": [w.to_dict() for w in workouts]}


@router.post("")
async def add_workout(request: Request):
    """Log one workout."""
    try:
        entry = _parse_entry(await _read_json(request))
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    workout = await create_workout(get_store(request), entry, get_notifier(request))
    return JSONResponse({"workout": workout.to_dict()}, status_code=201)


@router.post("/batch")
async def add_workouts(request: Request):
    """Log several workouts; either all are saved or none are."""
    body = await _read_json(request)
    if isinstance(body, dict):
        body = body.get("workouts")
    if not isinstance(body, list):
        return JSONResponse({"error": "Expected a list of workouts"}, status_code=400)

    try:
        entries = [_parse_entry(item) for item in body]
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    saved = await create_workouts(get_store(request), entries, get_notifier(request))
    return JSONResponse({"workouts": [w.to_dict() for w in saved]}, status_code=201)


@router.delete("/{workout_id}")
async def remove_workout(request: Request, workout_id: str):
    """Delete a workout by ID."""
    await delete_workout(get_store(request), workout_id, get_notifier(request))
    return {"status": "deleted", "id": workout_id}
