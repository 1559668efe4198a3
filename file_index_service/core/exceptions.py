"""
Exception hierarchy for the file index service.

Every pipeline stage failure is raised as one of these types. The batch
dispatcher maps all of them to a single batch item failure, so the type only
matters for logging and for the scan-status soft-failure path.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the service
"""

from typing import Any


class FileIndexError(Exception):
    """Base exception for all file index service errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class AuthError(FileIndexError):
    """Raised when the document store does not return an access token."""


class NotFoundError(FileIndexError):
    """Raised when the document store reports an unknown document."""

    def __init__(self, document_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize not found error.

        Args:
            document_id: Identifier of the missing document
            details: Additional context
        """
        details = details or {}
        details["document_id"] = document_id
        super().__init__(f"Document not found: {document_id}", details)


class ParseError(FileIndexError):
    """Raised when a payload (metadata, message body) is malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize parse error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class MessageParseError(ParseError):
    """Raised when an SQS message body is not a usable document reference."""


class ExtractionError(FileIndexError):
    """Raised when the extraction engine rejects document content."""

    def __init__(
        self,
        message: str,
        mime_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize extraction error.

        Args:
            message: Error message
            mime_type: Mime type the extractor was run for
            details: Additional context
        """
        details = details or {}
        if mime_type:
            details["mime_type"] = mime_type
        super().__init__(message, details)


class IndexingError(FileIndexError):
    """Raised when the search index rejects or cannot receive a document."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize indexing error.

        Args:
            message: Error message
            status_code: HTTP status returned by the search index, if any
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)


class ConfigError(FileIndexError):
    """Raised when required infrastructure or configuration is missing."""


class TransportError(FileIndexError):
    """Raised on network failures talking to any collaborator."""

    def __init__(
        self,
        message: str,
        service: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize transport error.

        Args:
            message: Error message
            service: Collaborator that failed (document_store, search_index, quarantine)
            details: Additional context
        """
        details = details or {}
        if service:
            details["service"] = service
        super().__init__(message, details)


class ScanStatusError(FileIndexError):
    """Raised when the scan-pending flag cannot be set and strict mode is on."""
