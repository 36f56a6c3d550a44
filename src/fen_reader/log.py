from __future__ import annotations

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "fen_reader"
LOG_LEVEL_ENV = "FEN_READER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return a logger inside the ``fen_reader`` namespace.

    Handlers are only attached by :func:`configure_logging`; library modules
    just emit records.
    """

    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def resolve_level(verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    level_name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """Attach a rich handler to the package logger and set its level."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(verbose))
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=console or Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
