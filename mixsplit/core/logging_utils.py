"""Logging setup shared by the pipelines and the command-line tools."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import LoggingConfig

PACKAGE_LOGGER = "mixsplit"

_handler: Optional[RichHandler] = None


def resolve_level(level: Optional[str] = None) -> int:
    """Turn a level name (or None for the environment default) into a number."""
    name = (level or LoggingConfig.level()).upper()
    return getattr(logging, name, logging.INFO)


def setup_logging(level: Optional[str] = None) -> None:
    """Attach a rich stderr handler to the package logger and set its level.

    The handler is installed once; later calls only adjust the level so each
    pipeline entry point can pick its own verbosity.
    """
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolve_level(level))

    if _handler is None:
        _handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        _handler.setFormatter(
            logging.Formatter(LoggingConfig.FORMAT, datefmt=LoggingConfig.DATE_FORMAT)
        )
        logger.addHandler(_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
