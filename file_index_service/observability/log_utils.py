"""
Structured log helpers for pipeline events.

Message bodies are untrusted input; they are shortened before they reach a
log line.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

from file_index_service.core.exceptions import FileIndexError

MAX_LOGGED_BODY = 200


def truncate(value: str, max_length: int = MAX_LOGGED_BODY) -> str:
    """Shorten a string for logging, noting the original length."""
    if len(value) <= max_length:
        return value
    return f"{value[:max_length]}... ({len(value)} chars)"


def log_event(logger: logging.Logger, message: str, **fields: Any) -> None:
    """Log an INFO event with its fields attached as record extras."""
    logger.info(message, extra=fields)


def log_failure(logger: logging.Logger, message_id: str, exc: BaseException) -> None:
    """
    Log a failed message with its traceback.

    Typed service errors carry their details; anything else is reported as
    unhandled.
    """
    if isinstance(exc, FileIndexError):
        summary = f"{type(exc).__name__}: {exc.message}"
        details = exc.details
    else:
        summary = f"Unhandled error: {type(exc).__name__}: {exc}"
        details = {}
    logger.error(
        "_process_message - %s",
        summary,
        exc_info=exc,
        extra={"message_id": message_id, "error_type": type(exc).__name__, "details": details},
    )
