"""
Quarantine upload task.

Uploads the original document bytes to the quarantine bucket where the
malware scanner picks them up. A missing bucket is a deployment fault and
fails the message; the scan is never skipped silently.

Dependencies: boundary.aws
System role: Stage 7 of the document indexing pipeline
"""

import logging
from typing import BinaryIO

from file_index_service.boundary.aws import QuarantineBucketClient
from file_index_service.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


class QuarantineTask:
    """Upload raw bytes for malware scanning."""

    def __init__(self, client: QuarantineBucketClient, bucket: str) -> None:
        """
        Initialize quarantine task.

        Args:
            client: Quarantine bucket client
            bucket: Quarantine bucket name
        """
        self._client = client
        self._bucket = bucket

    def upload(self, key: str, stream: BinaryIO, content_type: str, content_length: int) -> str:
        """
        Upload a document stream to the quarantine bucket.

        Args:
            key: Object key (document identifier)
            stream: Seekable stream with the original bytes
            content_type: Document mime type
            content_length: Size in bytes from the store metadata

        Returns:
            str: Object key written

        Raises:
            ConfigError: Quarantine bucket does not exist
            TransportError: S3 failure
        """
        if not self._client.bucket_exists(self._bucket):
            raise ConfigError(
                f"S3 bucket {self._bucket} does not exist, virus scan cannot be scheduled",
                details={"bucket": self._bucket, "key": key},
            )

        stream.seek(0)
        self._client.put_object(
            bucket=self._bucket,
            key=key,
            stream=stream,
            content_type=content_type,
            content_length=content_length,
        )
        logger.info(
            "upload - Document queued for virus scan",
            extra={"bucket": self._bucket, "key": key, "content_length": content_length},
        )
        return key
