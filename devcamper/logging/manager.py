"""
Logger setup for the DevCamper API.

Every logger gets a single stdout handler. Level and output format come from
the application settings (``DEBUG``, ``LOG_LEVEL``, ``LOG_JSON_FORMAT``).
"""

import logging
import sys
from typing import IO, Optional

from devcamper.config.base import BaseAppSettings
from devcamper.logging.formatters import JsonFormatter

Logger = logging.Logger

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: str, debug: bool = False) -> int:
    """Numeric level for a level name; ``debug`` always wins."""
    if debug:
        return logging.DEBUG
    return getattr(logging, level.upper(), logging.INFO)


def setup_logger(
    name: str,
    level: str = "INFO",
    format: str = DEFAULT_FORMAT,
    debug: bool = False,
    json_format: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    (Re)configure the named logger with one console handler.

    Handlers attached by earlier calls are replaced, so calling this twice
    for the same name does not duplicate output.

    Args:
        name: Logger name, usually the module's ``__name__``
        level: Level name such as ``"INFO"`` or ``"error"``
        format: Plain-text record format, unused for JSON output
        debug: Force the DEBUG level
        json_format: Emit records through ``JsonFormatter``
        stream: Target stream, stdout by default

    Returns:
        The configured logger
    """
    log_level = resolve_level(level, debug)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(format))

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(handler)
    # Records are printed by this handler only, not again by parent loggers
    logger.propagate = False
    return logger


def get_logger(
    name: str, settings: Optional[BaseAppSettings] = None, json_format: bool = False
) -> logging.Logger:
    """
    Logger configured from application settings.

    Without settings the logger logs at INFO in plain text.
    """
    if settings is None:
        return setup_logger(name, json_format=json_format)

    return setup_logger(
        name,
        level=settings.LOG_LEVEL,
        debug=settings.DEBUG,
        json_format=json_format or settings.LOG_JSON_FORMAT,
    )


def ensure_logger(
    logger: Optional[logging.Logger] = None,
    name: Optional[str] = None,
    settings: Optional[BaseAppSettings] = None,
    json_format: bool = False,
) -> logging.Logger:
    """
    Return ``logger`` if given, otherwise a new logger called ``name``.

    Raises:
        ValueError: Neither a logger nor a name was provided
    """
    if logger is not None:
        return logger
    if not name:
        raise ValueError("Module name must be provided when logger is not specified")
    return get_logger(name, settings, json_format)
