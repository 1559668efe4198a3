"""
Scoped ownership of the document byte stream.

The stream opened for a document is closed exactly once when the scope
exits, whether the pipeline finished, raised a typed stage error or failed
unexpectedly. A failing close is logged and never replaces the error that
is already propagating.

Dependencies: logging (stdlib)
System role: Resource release for pipeline runs
"""

import logging
from types import TracebackType
from typing import BinaryIO, Callable

logger = logging.getLogger(__name__)


class StreamGuard:
    """Context manager that opens a stream lazily and closes it once."""

    def __init__(self, open_stream: Callable[[], BinaryIO], document_id: str) -> None:
        """
        Initialize guard.

        Args:
            open_stream: Zero-argument callable returning the stream
            document_id: Document identifier (for log context)
        """
        self._open_stream = open_stream
        self._document_id = document_id
        self._stream: BinaryIO | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        """Whether close has been attempted."""
        return self._closed

    def __enter__(self) -> BinaryIO:
        self._stream = self._open_stream()
        return self._stream

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        # Never suppress the pipeline's own exception
        return False

    def close(self) -> None:
        """Close the stream if it was opened. Subsequent calls are no-ops."""
        if self._closed or self._stream is None:
            return
        self._closed = True
        try:
            self._stream.close()
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "close - File stream cleanup failed: %s: %s",
                type(e).__name__,
                e,
                extra={"document_id": self._document_id},
            )
