"""Structured logging configuration."""

import logging
import sys
from typing import Any

# Configure logging format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Setup a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    logger.addHandler(handler)

    return logger


def log_operation_event(
    logger: logging.Logger,
    operation: str,
    event: str,
    level: int = logging.INFO,
    **kwargs: Any
) -> None:
    """
    Log a structured toolkit operation event.

    Args:
        logger: Logger instance
        operation: Operation name (e.g. "locate", "make_relative")
        event: Event description
        level: Logging level for the record
        **kwargs: Additional context
    """
    context = " ".join(f"{k}={v!r}" for k, v in kwargs.items())
    logger.log(level, f"[OP:{operation}] {event} {context}".strip())

