"""Logging setup for the CLI process.

Library modules only create ``logging.getLogger(__name__)`` loggers;
the handler is installed once here, rendering through the stderr Rich
console so log lines never mix with data on stdout.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from cmdbox.cli.console import console

ROOT_LOGGER: str = "cmdbox"


def configure_logging(level: int) -> logging.Logger:
    """Attach a :class:`RichHandler` to the package logger at *level*.

    Repeated calls replace the handler instead of stacking another one.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
