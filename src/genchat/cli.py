"""CLI main module for genchat."""

from __future__ import annotations

from typing import Optional

import typer
from loguru import logger

from genchat.channel import open_channel
from genchat.config import API_KEY_ENV, get_settings
from genchat.errors import ConfigurationError
from genchat.logging_utils import configure_logging
from genchat.params import collect_generation_config
from genchat.render import Renderer
from genchat.session import ChatSession, SessionContext

API_KEY_HINT = f'Please create a .env file with {API_KEY_ENV}="YOUR_API_KEY_HERE"'

app = typer.Typer(
    name="genchat",
    help="Chat with a hosted generative model from the console.",
    add_completion=False,
)


def _exit_with_error(code: int = 1) -> None:
    """Exit with error code."""
    raise typer.Exit(code)


@app.command()
def chat(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override GENCHAT_LOG_LEVEL."),
) -> None:
    """Configure generation parameters and start an interactive chat."""
    settings = get_settings()
    configure_logging(log_level or settings.log_level)
    renderer = Renderer()

    try:
        settings.require_api_key()
    except ConfigurationError as exc:
        logger.debug("startup aborted: {}", exc)
        renderer.error(str(exc))
        renderer.error_console.print(API_KEY_HINT, markup=False)
        _exit_with_error()

    renderer.welcome()
    generation = collect_generation_config(renderer.ask, renderer.info)
    session = ChatSession(
        SessionContext(settings=settings, generation=generation),
        renderer,
        channel_factory=open_channel,
    )
    code = session.run()
    if code != 0:
        _exit_with_error(code)
