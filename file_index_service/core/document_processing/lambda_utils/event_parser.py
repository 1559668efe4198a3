"""
SQS event and message body parsing utilities for Lambda.

The message body is untrusted. It must be either a bare document identifier
or a URL pointing at the document in the store; anything else is rejected
before it reaches a URL path or an S3 key.
"""

import logging
import re
from typing import Any
from urllib.parse import unquote, urlparse

from pydantic import ValidationError

from file_index_service.core.document_processing.models import InboundMessage, SQSEvent
from file_index_service.core.exceptions import MessageParseError

logger = logging.getLogger(__name__)

DOCUMENT_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]{0,127}$")


def parse_sqs_event(event: dict[str, Any] | None) -> list[InboundMessage]:
    """
    Parse a Lambda SQS event into inbound messages.

    An absent event or an event without records is an empty batch.

    Raises:
        MessageParseError: Records exist but the envelope is malformed
    """
    if not event or not event.get("Records"):
        return []

    try:
        sqs_event = SQSEvent.model_validate(event)
    except ValidationError as e:
        logger.error("parse_sqs_event - ValidationError: %s", e)
        raise MessageParseError(f"Invalid SQS event envelope: {e.error_count()} errors") from e

    return sqs_event.messages()


def _validate_document_id(candidate: str, body: str) -> str:
    if ".." in candidate or not DOCUMENT_ID_PATTERN.match(candidate):
        raise MessageParseError(
            "Message body is not a valid document identifier",
            field="body",
            details={"body": body[:200]},
        )
    return candidate


def resolve_document_id(body: str, allowed_host: str | None = None) -> str:
    """
    Resolve a message body to a document identifier.

    Accepted forms:
        1027384
        https://host/wfdm-document-api/documents/1027384
        https://host/wfdm-document-api/documents/1027384/bytes

    Args:
        body: Raw message body
        allowed_host: If set, URL bodies must point at this host

    Returns:
        str: Document identifier

    Raises:
        MessageParseError: Body is empty, a foreign URL, or not an identifier
    """
    value = (body or "").strip()
    if not value:
        raise MessageParseError("Empty message body", field="body")

    if "://" not in value:
        return _validate_document_id(value, body)

    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise MessageParseError("Unsupported document URL", field="body", details={"body": body[:200]})
    if allowed_host and parsed.hostname != allowed_host.lower():
        raise MessageParseError(
            "Document URL does not point at the document store",
            field="body",
            details={"host": parsed.hostname},
        )

    segments = [unquote(segment) for segment in parsed.path.split("/") if segment]
    if segments and segments[-1] == "bytes":
        segments = segments[:-1]
    if len(segments) < 2 or segments[-2] != "documents":
        raise MessageParseError(
            "Document URL path must end in /documents/{id}",
            field="body",
            details={"path": parsed.path[:200]},
        )
    return _validate_document_id(segments[-1], body)
