"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..config import Settings
from ..db import DataStore, create_store, get_db_path


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_settings(ctx: click.Context | None = None) -> Settings:
    """Settings stored on the root context, or read from the environment."""
    if ctx is not None:
        root = ctx.find_root()
        if isinstance(root.obj, Settings):
            return root.obj
    return Settings.from_env()


def get_store(ctx: click.Context | None = None) -> DataStore:
    """The configured data store."""
    return create_store(get_settings(ctx))


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the local database is initialized."""
    settings = get_settings(ctx)
    if settings.uses_supabase:
        return
    db_path = settings.database_path or get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Database not initialized. Run 'workout-tracker init' first."
        )
        ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(line.rstrip() for line in lines)
