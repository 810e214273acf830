"""Web server command."""

import click

from ..db import get_db_path
from .base import echo_info, ensure_initialized, get_settings


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Restart when source files change")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Serve the workout log, gym grid and coach chat.

    Examples:

        workout-tracker serve

        workout-tracker serve --host 0.0.0.0 --port 3000
    """
    ensure_initialized(ctx)
    settings = get_settings(ctx)

    import uvicorn

    from ..web import create_app

    if settings.uses_supabase:
        store = settings.supabase_url
    else:
        store = settings.database_path or get_db_path()
    click.echo()
    click.echo(click.style(f"Workout tracker on http://{host}:{port}", fg="green"))
    echo_info(f"Store: {store}")
    if not settings.groq_api_key:
        echo_info("GROQ_API_KEY is not set; the coach chat will return errors")
    click.echo()

    # With --reload uvicorn re-imports the app, so it must build it from a factory
    target = "workout_tracker.web:create_app" if reload else create_app(settings)
    uvicorn.run(target, host=host, port=port, reload=reload, factory=reload)
