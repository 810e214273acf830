"""Gym attendance commands."""

from datetime import date, datetime

import click

from ..db import StoreError
from ..services import list_weekly_gym_visits, toggle_gym_visit, week_dates
from .base import async_command, echo_error, echo_success, ensure_initialized, get_store


def render_week(visited: set[date], now: datetime | None = None) -> str:
    """Render the Mon-Sun attendance grid as two lines of text."""
    days = week_dates(now)
    names = []
    marks = []
    for day in days:
        label = f"{day.name} {day.date.day}"
        if day.is_today:
            label = f"[{label}]"
        names.append(label.center(10))
        marks.append(("X" if day.date in visited else ".").center(10))
    return "".join(names).rstrip() + "\n" + "".join(marks).rstrip()


@click.group()
@click.pass_context
def gym(ctx):
    """Track gym attendance for the current week."""
    ensure_initialized(ctx)


@gym.command()
@click.pass_context
@async_command
async def week(ctx):
    """Show this week's attendance."""
    try:
        visits = await list_weekly_gym_visits(get_store(ctx))
    except StoreError as e:
        echo_error(str(e))
        ctx.exit(1)

    visited = {v.visited_date for v in visits}
    click.echo()
    click.echo(render_week(visited))
    click.echo()
    click.echo(f"{len(visited)} / 7 days this week")


@gym.command()
@click.argument("day", required=False, type=click.DateTime(formats=["%Y-%m-%d"]))
@click.pass_context
@async_command
async def toggle(ctx, day: datetime | None):
    """Mark or unmark DAY (YYYY-MM-DD, default today) as attended."""
    visited_date = day.date() if day else date.today()

    try:
        attended = await toggle_gym_visit(get_store(ctx), visited_date)
    except StoreError as e:
        echo_error(f"Failed to update attendance: {e}")
        ctx.exit(1)

    state = "attended" if attended else "not attended"
    echo_success(f"{visited_date.isoformat()} marked {state}")
