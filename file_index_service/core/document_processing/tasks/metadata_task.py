"""
Metadata task.

Resolves a document identifier to its metadata in the document store.

Dependencies: boundary.document_store, models
System role: Stage 2 of the document indexing pipeline
"""

from file_index_service.boundary.document_store import DocumentStoreClient
from file_index_service.core.document_processing.models import DocumentMetadata
from file_index_service.core.exceptions import NotFoundError


class MetadataTask:
    """Fetch and parse document metadata."""

    def __init__(self, client: DocumentStoreClient) -> None:
        self._client = client

    def fetch(self, token: str, document_id: str) -> DocumentMetadata:
        """
        Fetch metadata for a document.

        Args:
            token: Access token
            document_id: Document identifier

        Returns:
            DocumentMetadata: Parsed metadata (extra store fields preserved)

        Raises:
            NotFoundError: Store does not know the document
            ParseError: Payload is malformed
            TransportError: Metadata endpoint unreachable
        """
        payload = self._client.get_metadata(token, document_id)
        if payload is None:
            raise NotFoundError(document_id)
        return DocumentMetadata.from_payload(payload)
