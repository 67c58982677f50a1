"""Logging setup.

Every module logs through `logging.getLogger(__name__)`; this module wires
the root `dingus` handlers once per invocation. Output goes to stderr through
Rich so that stdout stays reserved for export statements.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAMES = ("adapters", "core", "cli")


def configure_logging(level: str = "WARNING", *, console: Console | None = None) -> None:
    """Attach a single RichHandler to the package loggers."""

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    for name in _LOGGER_NAMES:
        logger = logging.getLogger(name)
        for existing in logger.handlers[:]:
            logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.setLevel(numeric_level)
        logger.propagate = False
