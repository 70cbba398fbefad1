"""
Centralized logging configuration for cartstate.

Cart transitions log at DEBUG and contaminated totals at WARNING. Product
keys and currency codes come from dispatched actions, so they go through
the sanitize helpers before reaching a log record.

Usage:
    from cartstate.logging import get_logger, sanitize_key_for_logging
    logger = get_logger(__name__)

    logger.debug("Added %s", sanitize_key_for_logging(key))
"""

import logging
import os
import sys
from functools import cache

# Default format for logs
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"


def _get_log_level() -> int:
    """Get log level from environment or default to INFO."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _configure_root_logger() -> None:
    """Configure root logger unless the host application already did."""
    root = logging.getLogger()

    # Only configure if no handlers exist
    if root.handlers:
        return

    root.setLevel(_get_log_level())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_get_log_level())

    is_simple = os.environ.get("LOG_FORMAT", "").lower() == "simple"
    formatter = logging.Formatter(LOG_FORMAT_SIMPLE if is_simple else LOG_FORMAT)
    handler.setFormatter(formatter)

    root.addHandler(handler)


# Configure once on module import
_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def _escape_log_injection(value: str) -> str:
    """Escape control characters that could forge log entries (CWE-117)."""
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_string_for_logging(value: object | None, max_length: int = 50) -> str:
    """
    Sanitize a user-controlled value for logging.

    Escapes log injection characters and truncates to max_length.

    Args:
        value: Value to sanitize (can be None)
        max_length: Maximum length to keep (default: 50)

    Returns:
        Sanitized string or "N/A" if empty
    """
    if value is None or value == "":
        return "N/A"
    safe_value = _escape_log_injection(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


def sanitize_key_for_logging(key: str | None, max_length: int = 32) -> str:
    """
    Sanitize a product key for logging.

    Product keys embed caller-supplied property values ("a1_XS_nickel"), so
    they get the same escaping as other strings. They are cut shorter, and
    the tail is kept because it tells variants of one product apart.

    Args:
        key: Product key (can be None)
        max_length: Maximum length to keep (default: 32)

    Returns:
        Sanitized key, "..." followed by its last max_length characters when
        longer, or "N/A" if empty
    """
    if not key:
        return "N/A"
    safe_value = _escape_log_injection(str(key))
    if len(safe_value) <= max_length:
        return safe_value
    return "..." + safe_value[-max_length:]


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "sanitize_key_for_logging",
    "sanitize_string_for_logging",
]
