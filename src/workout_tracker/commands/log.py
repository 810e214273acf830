"""Interactive workout logging command."""

import math

import click
import questionary
from questionary import Style

from ..db import StoreError
from ..models.workout import WorkoutCreate, format_weight
from ..services import create_workout
from .base import async_command, echo_error, echo_success, ensure_initialized, get_store

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("instruction", ""),
        ("text", ""),
    ]
)


async def collect_workout(defaults: dict[str, str | None]) -> dict[str, str] | None:
    """Ask for any workout field not given on the command line.

    Returns None if the user aborts with Ctrl+C.
    """
    questions = [
        ("exercise", "Exercise (e.g., Bench Press):"),
        ("sets", "Sets:"),
        ("reps", "Reps:"),
        ("weight", "Weight (lbs):"),
    ]

    answers = {}
    for field, prompt in questions:
        if defaults.get(field) is not None:
            answers[field] = defaults[field]
            continue
        value = await questionary.text(
            prompt,
            validate=lambda text: bool(text.strip()) or "Required",
            style=custom_style,
        ).ask_async()
        if value is None:
            return None
        answers[field] = value

    if defaults.get("notes") is not None:
        answers["notes"] = defaults["notes"]
    else:
        notes = await questionary.text(
            "Notes (optional):", style=custom_style
        ).ask_async()
        if notes is None:
            return None
        answers["notes"] = notes

    return answers


@click.command()
@click.option("--exercise", "-e", help="Exercise name")
@click.option("--sets", "-s", help="Number of sets")
@click.option("--reps", "-r", help="Reps per set")
@click.option("--weight", "-w", help="Weight in lbs")
@click.option("--notes", "-n", help="Optional notes")
@click.pass_context
@async_command
async def log(ctx: click.Context, exercise, sets, reps, weight, notes):
    """Log a workout.

    Prompts for any field not passed as an option.

    Examples:

        workout-tracker log

        workout-tracker log -e "Bench Press" -s 3 -r 10 -w 135 -n ""
    """
    ensure_initialized(ctx)

    answers = await collect_workout(
        {"exercise": exercise, "sets": sets, "reps": reps, "weight": weight, "notes": notes}
    )
    if answers is None:
        click.echo("Cancelled")
        return

    entry = WorkoutCreate.from_form(answers)
    if any(isinstance(v, float) and math.isnan(v) for v in (entry.sets, entry.reps, entry.weight)):
        echo_error("Sets, reps and weight must be numbers")
        ctx.exit(1)

    try:
        workout = await create_workout(get_store(ctx), entry)
    except StoreError as e:
        echo_error(f"Failed to add workout: {e}")
        ctx.exit(1)

    echo_success(
        f"Logged {workout.exercise}: {workout.sets}x{workout.reps} @ {format_weight(workout.weight)} lbs"
    )
