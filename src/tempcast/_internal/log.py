"""Logging setup for the ``tempcast`` logger namespace."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "tempcast"


def setup_logging(*, verbose: bool = False) -> logging.Logger:
    """Attach a stderr :class:`~rich.logging.RichHandler` to the package logger.

    Verbose mode logs at DEBUG, otherwise only warnings and errors are
    shown.  Calling this again replaces the previously installed handler.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        level=level,
        show_path=False,
        rich_tracebacks=verbose,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
