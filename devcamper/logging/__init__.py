"""
Logging module for the DevCamper API.

This module provides a simple logging interface
that integrates with application settings.

Limitations:
- Only console (stdout) logging is supported out of the box.
- JSON logs include only timestamp, level, logger name and message.
"""

from devcamper.logging.formatters import JsonFormatter
from devcamper.logging.manager import Logger, ensure_logger, get_logger, setup_logger

__all__ = [
    "Logger",
    "get_logger",
    "ensure_logger",
    "setup_logger",
    "JsonFormatter",
]
