"""Workout history commands."""

import click

from ..db import StoreError
from ..models.workout import format_weight
from ..services import delete_workout, list_recent_workouts, list_workouts
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    get_store,
)


@click.group()
@click.pass_context
def workouts(ctx):
    """View and delete logged workouts."""
    ensure_initialized(ctx)


@workouts.command(name="list")
@click.option("--days", "-d", type=int, help="Only show the last N days")
@click.pass_context
@async_command
async def list_cmd(ctx, days: int | None):
    """List workouts, newest first."""
    store = get_store(ctx)
    try:
        if days is None:
            entries = await list_workouts(store)
        else:
            entries = await list_recent_workouts(store, days)
    except StoreError as e:
        echo_error(str(e))
        ctx.exit(1)

    if not entries:
        echo_info("No workouts logged yet. Add one with 'workout-tracker log'")
        return

    headers = ["ID", "Date", "Exercise", "Sets", "Reps", "Weight", "Notes"]
    rows = []
    for w in entries:
        notes = w.notes or "-"
        rows.append([
            w.id[:8],
            w.created_at.astimezone().strftime("%Y-%m-%d %H:%M"),
            w.exercise,
            str(w.sets),
            str(w.reps),
            f"{format_weight(w.weight)} lbs",
            notes[:30] + "..." if len(notes) > 30 else notes,
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(entries)} workout(s)")


@workouts.command()
@click.argument("workout_id")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, workout_id: str, force: bool):
    """Delete a workout by ID (a unique ID prefix also works)."""
    store = get_store(ctx)

    try:
        entries = await list_workouts(store)
    except StoreError as e:
        echo_error(f"Failed to load workouts: {e}")
        ctx.exit(1)

    matches = [w for w in entries if w.id.startswith(workout_id)]
    if not matches:
        echo_error(f"Workout {workout_id} not found")
        ctx.exit(1)
    if len(matches) > 1:
        echo_error(f"Workout ID prefix {workout_id} is ambiguous")
        ctx.exit(1)

    workout = matches[0]
    if not force:
        click.echo(f"Workout: {workout.exercise} {workout.sets}x{workout.reps}")
        if not click.confirm("Are you sure you want to delete this workout?"):
            echo_info("Cancelled")
            return

    try:
        await delete_workout(store, workout.id)
    except StoreError as e:
        echo_error(f"Failed to delete workout: {e}")
        ctx.exit(1)

    echo_success(f"Workout {workout.id[:8]} deleted")
