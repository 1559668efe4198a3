"""
Scan status task.

Marks the document as awaiting a malware scan. By default this is a soft
failure: a rejected or failed update is logged and the pipeline carries on,
since indexing the document matters more than the status flag. Strict mode
turns the failure into a ScanStatusError.

Dependencies: boundary.document_store
System role: Side branch of the document indexing pipeline (after stream open)
"""

import logging
from typing import Any

from file_index_service.boundary.document_store import DocumentStoreClient
from file_index_service.core.exceptions import ScanStatusError

logger = logging.getLogger(__name__)


class ScanStatusTask:
    """Record the scan-pending flag on a document."""

    def __init__(self, client: DocumentStoreClient, strict: bool = False) -> None:
        """
        Initialize scan status task.

        Args:
            client: Document store client
            strict: Raise instead of logging when the flag cannot be set
        """
        self._client = client
        self._strict = strict

    def mark_pending(self, token: str, document_id: str, metadata: dict[str, Any]) -> bool:
        """
        Set the scan-pending flag.

        Args:
            token: Access token
            document_id: Document identifier
            metadata: Metadata payload to write back

        Returns:
            bool: True if the flag was recorded

        Raises:
            ScanStatusError: Only in strict mode, when the flag was not recorded
        """
        try:
            applied = self._client.set_scan_pending_flag(token, document_id, metadata)
            reason = "update rejected by document store"
        except Exception as e:  # pylint: disable=broad-except
            applied = False
            reason = f"{type(e).__name__}: {e}"

        if applied:
            return True

        if self._strict:
            raise ScanStatusError(
                "Could not record scan-pending status",
                details={"document_id": document_id, "reason": reason},
            )

        logger.warning(
            "mark_pending - Scan-pending flag not recorded, continuing: %s",
            reason,
            extra={"document_id": document_id},
        )
        return False
