"""Unit tests for the batch outcome and document metadata models."""

import threading

import pytest

from file_index_service.core.document_processing.models import BatchOutcome, DocumentMetadata
from file_index_service.core.exceptions import ParseError


def test_empty_outcome_response():
    """Test that an empty outcome acknowledges the whole batch."""
    assert BatchOutcome().to_response() == {"batchItemFailures": []}


def test_add_failure_deduplicates():
    """Test that a message ID is reported at most once."""
    outcome = BatchOutcome()

    assert outcome.add_failure("msg-1") is True
    assert outcome.add_failure("msg-2") is True
    assert outcome.add_failure("msg-1") is False

    assert outcome.to_response() == {
        "batchItemFailures": [{"itemIdentifier": "msg-1"}, {"itemIdentifier": "msg-2"}]
    }
    assert outcome.failed_ids == {"msg-1", "msg-2"}


def test_add_failure_from_threads():
    """Test concurrent failure recording keeps one entry per ID."""
    outcome = BatchOutcome()
    threads = [
        threading.Thread(target=outcome.add_failure, args=(f"msg-{i % 5}",))
        for i in range(50)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcome.failed_ids == {f"msg-{i}" for i in range(5)}
    assert len(outcome.batch_item_failures) == 5


def test_metadata_round_trips_store_fields():
    """Test that unknown store fields survive parsing."""
    payload = {
        "fileId": 1027384,
        "mimeType": "application/pdf",
        "filePath": "/WFIM/Incidents/2024/report.pdf",
        "contentLength": 48213,
        "fileType": "DOCUMENT",
        "metadata": [],
    }

    metadata = DocumentMetadata.from_payload(payload)

    assert metadata.file_id == "1027384"
    assert metadata.file_name == "report.pdf"
    assert metadata.to_payload()["fileType"] == "DOCUMENT"
    assert metadata.to_payload()["filePath"] == payload["filePath"]


def test_metadata_missing_field_names_it():
    """Test that parse errors identify the offending field."""
    with pytest.raises(ParseError) as exc_info:
        DocumentMetadata.from_payload({"filePath": "/a.txt", "contentLength": 1})

    assert exc_info.value.details["field"] == "mimeType"
