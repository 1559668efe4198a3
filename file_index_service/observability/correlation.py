"""
Message-scoped log correlation.

The SQS message ID under processing is bound for the duration of one
pipeline run so the log filter can stamp it on every record. Each dispatcher
worker thread has its own context.

Dependencies: contextvars
System role: Per-message tracing across pipeline stages
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_message_id: ContextVar[str | None] = ContextVar("message_id", default=None)


def current_message_id() -> str | None:
    """Message ID bound to the current context, if any."""
    return _message_id.get()


@contextmanager
def message_scope(message_id: str) -> Iterator[str]:
    """Bind ``message_id`` until the block exits, then restore the previous value."""
    token = _message_id.set(message_id)
    try:
        yield message_id
    finally:
        _message_id.reset(token)
