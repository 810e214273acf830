"""Initialize database command."""

import click

from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success, get_settings


@click.command()
@click.pass_context
@async_command
async def init(ctx: click.Context):
    """Initialize the local SQLite database.

    Not needed when SUPABASE_URL and SUPABASE_ANON_KEY point at a
    hosted project; its tables are managed there.
    """
    settings = get_settings(ctx)
    if settings.uses_supabase:
        echo_info(f"Using hosted store at {settings.supabase_url}; nothing to initialize")
        return

    db_path = settings.database_path or get_db_path()
    echo_info(f"Initializing database at {db_path}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  workout-tracker log              # Log a workout")
    click.echo("  workout-tracker serve            # Open the web interface")
