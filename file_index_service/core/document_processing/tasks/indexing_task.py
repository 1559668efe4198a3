"""
Indexing task.

Publishes extracted content and store metadata to the search index.

Dependencies: boundary.search
System role: Stage 6 of the document indexing pipeline
"""

from file_index_service.boundary.search import OpenSearchIndexClient
from file_index_service.core.document_processing.models import DocumentMetadata


class IndexingTask:
    """Upsert a document into the search index."""

    def __init__(self, client: OpenSearchIndexClient) -> None:
        self._client = client

    def index(self, document_id: str, content: str, metadata: DocumentMetadata) -> None:
        """
        Upsert the index entry for a document.

        Raises:
            IndexingError: Index unreachable or rejected the document
        """
        self._client.upsert(
            content=content,
            file_name=metadata.file_name,
            metadata=metadata.to_payload(),
            document_id=document_id,
        )
