"""
Structured logging utilities for Mushaf library.

Provides a configured logger and helper functions for consistent logging.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union


# Default format for Mushaf logs
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = "mushaf") -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (default: "mushaf")

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """
    Configure logging for the Mushaf library.

    Args:
        level: Logging level or level name (default: INFO)
        format_string: Log format string (default: DEFAULT_FORMAT)
        date_format: Date format string (default: DEFAULT_DATE_FORMAT)
        stream: Output stream (default: sys.stderr)

    Returns:
        Configured root logger for mushaf
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger("mushaf")
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            format_string or DEFAULT_FORMAT,
            datefmt=date_format or DEFAULT_DATE_FORMAT,
        )
    )
    logger.addHandler(handler)

    return logger


# Create default logger
_logger = get_logger()


def _with_context(message: str, context: dict) -> str:
    if not context:
        return message
    ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
    return f"{message} ({ctx_str})"


def log_corpus_loaded(path: Union[str, Path], chapters: int, verses: int, elapsed_ms: float) -> None:
    """Log a completed corpus load."""
    _logger.info(f"Corpus loaded: {chapters} surahs, {verses} ayat from {path} in {elapsed_ms:.1f}ms")


def log_query(operation: str, **params) -> None:
    """Log a query operation and its arguments."""
    _logger.debug(_with_context(f"Query: {operation}", params))


def log_error(message: str, exc_info: bool = False, **context) -> None:
    """Log an error with optional context and exception info."""
    _logger.error(_with_context(message, context), exc_info=exc_info)
