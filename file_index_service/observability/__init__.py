"""
Observability module.

Provides logging configuration and per-message log correlation.
"""

from file_index_service.observability.correlation import current_message_id, message_scope
from file_index_service.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "current_message_id",
    "message_scope",
]
