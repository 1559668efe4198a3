"""
Document store (WFDM) HTTP client.

Wraps the four document API calls the pipeline needs: client-credentials
token, document metadata, document bytes and a metadata update recording
the scan status. Document bytes are spooled into a temporary file so the
pipeline can read them twice (extraction, then quarantine upload).

Dependencies: httpx
System role: Document store adapter
"""

import logging
import tempfile
from typing import Any, BinaryIO

import httpx

from file_index_service.core.exceptions import NotFoundError, ParseError, TransportError

logger = logging.getLogger(__name__)

# Bytes kept in memory before the spool rolls over to /tmp
SPOOL_MAX_MEMORY_BYTES = 8 * 1024 * 1024

METADATA_RESOURCE_TYPE = "http://resources.wfdm.nrs.gov.bc.ca/fileMetadataResource"


class DocumentStoreClient:
    """HTTP client for the document store API."""

    def __init__(
        self,
        base_url: str,
        token_url: str,
        timeout: float = 30.0,
        scan_status_metadata_name: str = "WFDMVirusScanStatus",
        scan_status_pending_value: str = "PENDING",
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize document store client.

        Args:
            base_url: Document API base URL
            token_url: OAuth token endpoint
            timeout: Request timeout in seconds
            scan_status_metadata_name: Metadata entry holding the scan status
            scan_status_pending_value: Value written while the scan is pending
            http_client: Preconfigured client (tests inject a MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._token_url = token_url
        self._scan_status_name = scan_status_metadata_name
        self._scan_status_pending = scan_status_pending_value
        self._http = http_client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()

    def _document_url(self, document_id: str) -> str:
        return f"{self._base_url}/documents/{document_id}"

    @staticmethod
    def _auth_headers(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}", "Accept": "application/json"}

    def get_access_token(self, client_id: str, client_secret: str) -> str | None:
        """
        Obtain a client-credentials access token.

        Args:
            client_id: OAuth client ID
            client_secret: OAuth client secret

        Returns:
            str | None: Access token, or None when the server refuses credentials

        Raises:
            TransportError: Network failure or unexpected server error
        """
        try:
            response = self._http.post(
                self._token_url,
                params={"disableDeveloperFilter": "true", "grant_type": "client_credentials"},
                auth=(client_id, client_secret),
            )
        except httpx.HTTPError as e:
            raise TransportError(f"Token request failed: {e}", service="document_store") from e

        if response.status_code in (400, 401, 403):
            logger.warning(
                "get_access_token - Credentials rejected",
                extra={"status_code": response.status_code},
            )
            return None
        if response.is_error:
            raise TransportError(
                f"Token endpoint returned {response.status_code}",
                service="document_store",
            )

        try:
            return response.json().get("access_token")
        except ValueError as e:
            raise ParseError("Token response is not valid JSON") from e

    def get_metadata(self, token: str, document_id: str) -> dict[str, Any] | None:
        """
        Fetch document metadata.

        Args:
            token: Access token
            document_id: Document identifier

        Returns:
            dict | None: Decoded metadata payload, None if the document is unknown

        Raises:
            TransportError: Network failure or unexpected server error
            ParseError: Response body is not JSON
        """
        try:
            response = self._http.get(
                self._document_url(document_id),
                headers=self._auth_headers(token),
            )
        except httpx.HTTPError as e:
            raise TransportError(f"Metadata request failed: {e}", service="document_store") from e

        if response.status_code == 404:
            return None
        if response.is_error:
            raise TransportError(
                f"Metadata endpoint returned {response.status_code}",
                service="document_store",
                details={"document_id": document_id},
            )
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(
                "Metadata response is not valid JSON",
                details={"document_id": document_id},
            ) from e

    def open_content_stream(self, token: str, document_id: str) -> BinaryIO:
        """
        Download document bytes into a seekable spooled temporary file.

        The caller owns the returned stream and must close it.

        Args:
            token: Access token
            document_id: Document identifier

        Returns:
            BinaryIO: Stream positioned at the first byte

        Raises:
            NotFoundError: The store has no bytes for the document
            TransportError: Network failure or unexpected server error
        """
        spool = tempfile.SpooledTemporaryFile(
            max_size=SPOOL_MAX_MEMORY_BYTES,
            prefix="doc_index_",
        )
        try:
            with self._http.stream(
                "GET",
                f"{self._document_url(document_id)}/bytes",
                headers={"Authorization": f"Bearer {token}"},
            ) as response:
                if response.status_code == 404:
                    raise NotFoundError(document_id)
                if response.is_error:
                    raise TransportError(
                        f"Bytes endpoint returned {response.status_code}",
                        service="document_store",
                        details={"document_id": document_id},
                    )
                for chunk in response.iter_bytes():
                    spool.write(chunk)
        except httpx.HTTPError as e:
            spool.close()
            raise TransportError(f"Bytes request failed: {e}", service="document_store") from e
        except Exception:
            spool.close()
            raise

        spool.seek(0)
        return spool

    def set_scan_pending_flag(
        self, token: str, document_id: str, metadata: dict[str, Any]
    ) -> bool:
        """
        Record on the document that a malware scan is pending.

        Args:
            token: Access token
            document_id: Document identifier
            metadata: Metadata payload as returned by ``get_metadata``

        Returns:
            bool: True if the store accepted the update

        Raises:
            TransportError: Network failure
        """
        payload = dict(metadata)
        entries = [
            entry
            for entry in payload.get("metadata") or []
            if not (isinstance(entry, dict) and entry.get("metadataName") == self._scan_status_name)
        ]
        entries.append(
            {
                "@type": METADATA_RESOURCE_TYPE,
                "metadataName": self._scan_status_name,
                "metadataValue": self._scan_status_pending,
            }
        )
        payload["metadata"] = entries

        try:
            response = self._http.put(
                self._document_url(document_id),
                headers=self._auth_headers(token),
                json=payload,
            )
        except httpx.HTTPError as e:
            raise TransportError(
                f"Metadata update request failed: {e}", service="document_store"
            ) from e

        if response.is_error:
            logger.warning(
                "set_scan_pending_flag - Update rejected",
                extra={"document_id": document_id, "status_code": response.status_code},
            )
            return False
        return True
