"""Logging setup.

Modules log through `logging.getLogger(__name__)`; this attaches a Rich
handler on stderr to the package logger so stdout stays free for results
and protocol messages.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["LOGGER_NAME", "setup_logging"]

LOGGER_NAME = "devready"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger (idempotent).

    DEBUG when verbose, WARNING otherwise.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)

    logger.propagate = False
    return logger
