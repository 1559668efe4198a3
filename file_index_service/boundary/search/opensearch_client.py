"""
OpenSearch REST client for document indexing.

Upserts one JSON document per stored file. Requests to an AWS-managed domain
are signed with SigV4 using the Lambda role credentials.

Dependencies: httpx, botocore, pydantic
System role: Search index adapter
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote

import httpx
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.session import Session as BotocoreSession
from pydantic import BaseModel, Field

from file_index_service.core.exceptions import ConfigError, IndexingError

logger = logging.getLogger(__name__)


class SearchDocument(BaseModel):
    """Body of one index entry."""

    key: str = Field(description="Document identifier (index _id)")
    file_name: str = Field(serialization_alias="fileName")
    absolute_file_path: str = Field(serialization_alias="absoluteFilePath")
    mime_type: str = Field(serialization_alias="mimeType")
    file_size: int = Field(serialization_alias="fileSize")
    file_content: str = Field(default="", serialization_alias="fileContent")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Full store metadata payload")
    last_indexed: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        serialization_alias="lastIndexed",
    )

    @classmethod
    def build(cls, content: str, file_name: str, metadata: dict[str, Any], key: str) -> "SearchDocument":
        """Assemble an index entry from extracted content and store metadata."""
        return cls(
            key=key,
            file_name=file_name,
            absolute_file_path=str(metadata.get("filePath", "")),
            mime_type=str(metadata.get("mimeType", "")),
            file_size=int(metadata.get("contentLength") or 0),
            file_content=content,
            metadata=metadata,
        )


class OpenSearchIndexClient:
    """Upsert documents into an OpenSearch index over REST."""

    def __init__(
        self,
        endpoint: str,
        index_name: str,
        region: str = "ca-central-1",
        sign_requests: bool = True,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize OpenSearch client.

        Args:
            endpoint: Domain endpoint (https://...)
            index_name: Target index
            region: AWS region for SigV4 signing
            sign_requests: Sign requests with ambient AWS credentials
            timeout: Request timeout in seconds
            http_client: Preconfigured client (tests inject a MockTransport)
        """
        self._endpoint = endpoint.rstrip("/")
        self._index_name = index_name
        self._region = region
        self._sign_requests = sign_requests
        self._http = http_client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()

    def _signed_headers(self, method: str, url: str, body: bytes) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if not self._sign_requests:
            return headers

        credentials = BotocoreSession().get_credentials()
        if credentials is None:
            raise ConfigError("No AWS credentials available to sign search index requests")

        request = AWSRequest(method=method, url=url, data=body, headers=headers)
        SigV4Auth(credentials.get_frozen_credentials(), "es", self._region).add_auth(request)
        return dict(request.headers.items())

    def upsert(
        self,
        content: str,
        file_name: str,
        metadata: dict[str, Any],
        document_id: str,
    ) -> None:
        """
        Create or replace the index entry for a document.

        Args:
            content: Extracted text (empty when extraction was skipped)
            file_name: File name shown in search results
            metadata: Store metadata payload
            document_id: Document identifier used as the index _id

        Raises:
            IndexingError: Index rejected the document or could not be reached
            ConfigError: Signing enabled but no AWS credentials available
        """
        document = SearchDocument.build(content, file_name, metadata, key=document_id)
        body = json.dumps(document.model_dump(mode="json", by_alias=True)).encode("utf-8")
        url = f"{self._endpoint}/{self._index_name}/_doc/{quote(document_id, safe='')}"

        try:
            response = self._http.put(
                url,
                content=body,
                headers=self._signed_headers("PUT", url, body),
            )
        except httpx.HTTPError as e:
            raise IndexingError(f"Index request failed: {e}", details={"index": self._index_name}) from e

        if response.is_error:
            raise IndexingError(
                f"Search index rejected document {document_id}",
                status_code=response.status_code,
                details={"index": self._index_name, "response": response.text[:500]},
            )

        logger.info(
            "upsert - Document indexed",
            extra={
                "document_id": document_id,
                "index": self._index_name,
                "content_chars": len(content),
            },
        )
