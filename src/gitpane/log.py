"""Logging setup — stdlib loggers under ``gitpane.*`` rendered by Rich."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "gitpane"

LOG_LEVELS = ("debug", "info", "warning", "error")


def get_logger(name: str) -> logging.Logger:
    """Return the ``gitpane.<name>`` logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def setup_logging(level: str = "warning") -> None:
    """Route ``gitpane`` logs to stderr through a RichHandler.

    Calling again replaces the previous handler, so the CLI can re-run
    setup per invocation without stacking handlers.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root_logger.addHandler(handler)

    root_logger.propagate = False
