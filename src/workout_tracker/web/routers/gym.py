"""Gym attendance JSON API routes."""

from datetime import date

from fastapi import APIRouter, Request

from ...services import list_weekly_gym_visits, toggle_gym_visit, week_window
from ..dependencies import get_notifier, get_store

router = APIRouter(prefix="/api/gym-visits", tags=["gym"])


@router.get("")
async def get_weekly_visits(request: Request):
    """Visits in the current Monday-Sunday week."""
    monday, sunday = week_window()
    visits = await list_weekly_gym_visits(get_store(request))
    return {
        "week_start": monday.date().isoformat(),
        "week_end": sunday.date().isoformat(),
        "visits": [v.to_dict() for v in visits],
    }


@router.post("/{visited_date}/toggle")
async def toggle_visit(request: Request, visited_date: date):
    """Mark or unmark a day as attended."""
    attended = await toggle_gym_visit(get_store(request), visited_date, get_notifier(request))
    return {"date": visited_date.isoformat(), "attended": attended}
