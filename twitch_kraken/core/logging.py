"""Logging configuration for the demo server.

The library itself only logs through module loggers; handlers are the
host application's concern.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from twitch_kraken.core.config import Settings

# Loggers that are chatty at INFO: one line per request
NOISY_LOGGERS = ("uvicorn.access", "httpx")


def build_handler(settings: Settings) -> RichHandler:
    """Rich handler; development gets source paths and tracebacks with locals."""
    dev = settings.is_development
    console = Console(force_terminal=dev, width=settings.log_width)

    handler = RichHandler(
        console=console,
        show_path=dev,
        markup=True,
        rich_tracebacks=True,
        tracebacks_show_locals=dev,
        tracebacks_width=settings.log_width,
        log_time_format="[%Y-%m-%d %H:%M:%S]",
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s"))
    return handler


def setup_logging(settings: Settings) -> None:
    """Route the root logger through a single Rich handler."""
    # force=True: uvicorn configures the root logger first
    logging.basicConfig(
        level=settings.log_level,
        handlers=[build_handler(settings)],
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        f"Logging: {settings.log_level} | Env: {settings.environment}"
    )
