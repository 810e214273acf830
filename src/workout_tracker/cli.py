"""CLI entry point for workout-tracker."""

import click

from .commands import chat, gym, init, log, serve, workouts
from .config import Settings, configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="workout-tracker")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """workout-tracker: log workouts, track gym days and chat with an AI coach.

    Example usage:

        # Create the local database
        workout-tracker init

        # Log a workout
        workout-tracker log -e "Squat" -s 5 -r 5 -w 225

        # Mark today as a gym day
        workout-tracker gym toggle

        # Run the web interface, then chat from another terminal
        workout-tracker serve
        workout-tracker chat
    """
    settings = Settings.from_env()
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


# Register commands
main.add_command(init)
main.add_command(log)
main.add_command(workouts)
main.add_command(gym)
main.add_command(serve)
main.add_command(chat)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
