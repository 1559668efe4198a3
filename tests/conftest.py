"""
Shared test fixtures and configuration for the test suite.

Provides: collaborator mocks (document store, search index, quarantine
bucket), a close-tracking byte stream and a pipeline factory.
Dependencies: pytest, unittest.mock
System role: Test infrastructure and fixture management
"""

import io
from unittest.mock import MagicMock

import pytest

from file_index_service.boundary.aws import QuarantineBucketClient
from file_index_service.boundary.document_store import DocumentStoreClient
from file_index_service.boundary.search import OpenSearchIndexClient
from file_index_service.core.document_processing.configs import DocumentPipelineSettings
from file_index_service.core.document_processing.entrypoint import DocumentPipeline
from file_index_service.core.document_processing.models import ClientCredentials
from file_index_service.core.document_processing.tasks import ExtractionTask
from file_index_service.core.document_processing.tasks.extraction_task import PlainTextParser

QUARANTINE_BUCKET = "test-quarantine-bucket"


class TrackingStream(io.BytesIO):
    """BytesIO that counts close() calls and can fail the first one."""

    def __init__(self, data: bytes = b"", fail_on_close: bool = False) -> None:
        super().__init__(data)
        self.close_calls = 0
        self.fail_on_close = fail_on_close

    def close(self) -> None:
        self.close_calls += 1
        if self.fail_on_close and self.close_calls == 1:
            raise OSError("close failed")
        super().close()


def make_metadata_payload(
    document_id: str,
    mime_type: str = "text/plain",
    file_name: str | None = None,
    content_length: int = 11,
) -> dict:
    """Metadata payload as returned by the document store."""
    file_name = file_name or f"{document_id}.txt"
    return {
        "fileId": document_id,
        "mimeType": mime_type,
        "filePath": f"/WFIM/Incidents/{file_name}",
        "contentLength": content_length,
        "metadata": [],
    }


@pytest.fixture
def streams() -> dict[str, TrackingStream]:
    """Streams handed out by the mock document store, keyed by document ID."""
    return {}


@pytest.fixture
def mock_document_store(streams):
    """
    Create mock DocumentStoreClient.

    Every document exists as text/plain with body ``b"hello world"`` unless a
    test overrides ``get_metadata``.
    """
    store = MagicMock(spec=DocumentStoreClient)
    store.get_access_token.return_value = "token-123"
    store.get_metadata.side_effect = lambda token, document_id: make_metadata_payload(document_id)

    def _open(token, document_id):
        stream = TrackingStream(b"hello world")
        streams[document_id] = stream
        return stream

    store.open_content_stream.side_effect = _open
    store.set_scan_pending_flag.return_value = True
    return store


@pytest.fixture
def mock_index_client():
    """Create mock OpenSearchIndexClient."""
    return MagicMock(spec=OpenSearchIndexClient)


@pytest.fixture
def mock_bucket_client():
    """Create mock QuarantineBucketClient with an existing bucket."""
    client = MagicMock(spec=QuarantineBucketClient)
    client.bucket_exists.return_value = True
    return client


@pytest.fixture
def mock_pdf_parser():
    """Parser standing in for the PDF parser."""
    parser = MagicMock()
    parser.parse.return_value = [MagicMock(page_content="pdf page text")]
    return parser


@pytest.fixture
def mock_word_parser():
    """Parser standing in for the Word parser."""
    parser = MagicMock()
    parser.parse.return_value = [MagicMock(page_content="word text")]
    return parser


@pytest.fixture
def extraction_task(mock_pdf_parser, mock_word_parser):
    """Extraction task with the real text parser and mocked binary parsers."""
    return ExtractionTask(
        eligible_mime_types=["text/plain", "application/msword", "application/pdf"],
        parsers={
            "text/plain": PlainTextParser(),
            "application/pdf": mock_pdf_parser,
            "application/msword": mock_word_parser,
        },
    )


@pytest.fixture
def make_pipeline(mock_document_store, mock_index_client, mock_bucket_client, extraction_task):
    """Factory building a DocumentPipeline around the mock collaborators."""

    def _make(**settings_overrides) -> DocumentPipeline:
        return DocumentPipeline(
            document_store=mock_document_store,
            index_client=mock_index_client,
            bucket_client=mock_bucket_client,
            credentials=ClientCredentials(client_id="client", client_secret="secret"),
            quarantine_bucket=QUARANTINE_BUCKET,
            pipeline_settings=DocumentPipelineSettings(**settings_overrides),
            extraction_task=extraction_task,
            allowed_host="wfdm.example.gov",
        )

    return _make


@pytest.fixture
def pipeline(make_pipeline) -> DocumentPipeline:
    """Pipeline with default settings."""
    return make_pipeline()


@pytest.fixture
def stream_factory():
    """Return the close-tracking stream class."""
    return TrackingStream
