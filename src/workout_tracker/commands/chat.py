"""Terminal chat with the AI coach."""

import click
import httpx
import questionary

from ..chat.session import ChatSession
from ..models.chat import ChatTurn, Role
from .base import async_command, echo_error, echo_success
from .log import custom_style


class TerminalRenderer:
    """Prints assistant text as it streams in."""

    def __init__(self):
        self._printed: dict[str, str] = {}

    def __call__(self, turn: ChatTurn) -> None:
        if turn.role != Role.ASSISTANT:
            return

        shown = self._printed.get(turn.id)
        if shown is None:
            click.echo(click.style("Coach: ", fg="green", bold=True), nl=False)
            shown = ""

        if turn.content.startswith(shown):
            click.echo(turn.content[len(shown):], nl=False)
        else:
            # Content was replaced (error message), not extended
            click.echo()
            click.echo(click.style(turn.content, fg="red"), nl=False)
        self._printed[turn.id] = turn.content


async def offer_quick_add(session: ChatSession, reply: ChatTurn) -> None:
    """Let the user log any exercises found in the reply."""
    suggestions = session.suggestions(reply)
    if not suggestions:
        return

    chosen = await questionary.checkbox(
        "Log any of these exercises?",
        choices=[
            questionary.Choice(
                f"{s.exercise} ({s.sets}x{s.reps} @ {s.weight} lbs)", value=s
            )
            for s in suggestions
        ],
        style=custom_style,
    ).ask_async()

    for suggestion in chosen or []:
        if await session.quick_add(suggestion):
            echo_success(f"Saved {suggestion.exercise}")
        else:
            echo_error(f"Failed to save {suggestion.exercise}")


@click.command()
@click.option(
    "--url",
    default="http://127.0.0.1:8000",
    show_default=True,
    help="Base URL of a running 'workout-tracker serve'",
)
@async_command
async def chat(url: str):
    """Chat with the AI coach in the terminal.

    Talks to the web server's chat endpoint, so start it first with
    'workout-tracker serve'. Submit an empty message to quit.
    """
    renderer = TerminalRenderer()

    async with httpx.AsyncClient(base_url=url, timeout=None) as client:
        session = ChatSession(client, on_change=renderer)

        while True:
            text = await questionary.text("You:", style=custom_style).ask_async()
            if not text or not text.strip():
                break

            reply = await session.send(text)
            click.echo()
            if reply is not None:
                await offer_quick_add(session, reply)
