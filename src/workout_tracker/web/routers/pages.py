"""HTML page and form routes."""

import logging
from datetime import date, datetime

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ...db.store import StoreError
from ...events import View
from ...models.workout import WorkoutCreate
from ...services import (
    create_workout,
    delete_workout,
    list_weekly_gym_visits,
    list_workouts,
    toggle_gym_visit,
    week_dates,
    week_window,
)
from ..dependencies import get_notifier, get_store, get_templates, get_view_cache

log = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])


async def render_home(request: Request, error: str | None = None, status_code: int = 200):
    """Render the home page from cached views."""
    templates = get_templates(request)
    store = get_store(request)
    cache = get_view_cache(request)

    now = datetime.now()
    monday, _ = week_window(now)

    workouts = await cache.get_or_load(View.WORKOUTS, lambda: list_workouts(store))
    visits = await cache.get_or_load(
        View.GYM_VISITS,
        lambda: list_weekly_gym_visits(store, now),
        key=monday.date().isoformat(),
    )

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "workouts": workouts,
            "days": week_dates(now),
            "visited": {v.visited_date for v in visits},
            "error": error,
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Weekly attendance, workout form, history and coach chat."""
    return await render_home(request)


@router.post("/workouts", response_class=HTMLResponse)
async def submit_workout(
    request: Request,
    exercise: str = Form(""),
    sets: str = Form(""),
    reps: str = Form(""),
    weight: str = Form(""),
    notes: str = Form(""),
):
    """Log a workout from the form."""
    entry = WorkoutCreate.from_form(
        {"exercise": exercise, "sets": sets, "reps": reps, "weight": weight, "notes": notes}
    )

    try:
        await create_workout(get_store(request), entry, get_notifier(request))
    except StoreError as e:
        log.warning("Failed to add workout: %s", e)
        return await render_home(request, error=str(e) or "Failed to add workout", status_code=400)

    return RedirectResponse(url="/", status_code=302)


@router.post("/workouts/{workout_id}/delete")
async def remove_workout(request: Request, workout_id: str):
    """Delete a workout row from the history table."""
    try:
        await delete_workout(get_store(request), workout_id, get_notifier(request))
    except StoreError as e:
        # The row simply stays in the list
        log.error("Failed to delete workout %s: %s", workout_id, e)

    return RedirectResponse(url="/", status_code=302)


@router.post("/gym/toggle")
async def toggle_day(request: Request, visited_date: str = Form(..., alias="date")):
    """Toggle attendance for one cell of the weekly grid."""
    try:
        day = date.fromisoformat(visited_date)
    except ValueError:
        return await render_home(request, error=f"Invalid date: {visited_date}", status_code=400)

    try:
        await toggle_gym_visit(get_store(request), day, get_notifier(request))
    except StoreError as e:
        log.error("Failed to toggle gym visit on %s: %s", visited_date, e)

    return RedirectResponse(url="/", status_code=302)
