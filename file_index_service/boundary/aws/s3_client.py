"""
S3 client for the quarantine bucket.

Checks that the bucket exists and uploads raw document bytes for the
malware scanner.

Dependencies: boto3
System role: Quarantine storage adapter
"""

from typing import BinaryIO

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from file_index_service.core.exceptions import TransportError

MISSING_BUCKET_CODES = {"404", "NoSuchBucket", "NotFound"}


class QuarantineBucketClient:
    """S3 client for quarantine bucket operations."""

    def __init__(self, region: str = "ca-central-1", s3_client=None) -> None:
        """
        Initialize S3 client.

        Args:
            region: AWS region for the bucket
            s3_client: Preconfigured boto3 S3 client (tests inject a mock)
        """
        self._region = region
        self._s3_client = s3_client or boto3.client("s3", region_name=region)

    def bucket_exists(self, bucket: str) -> bool:
        """
        Check if a bucket exists and is reachable.

        Args:
            bucket: Bucket name

        Returns:
            bool: True if the bucket exists, False if S3 reports it missing

        Raises:
            TransportError: Any other S3 failure (access denied, network)
        """
        try:
            self._s3_client.head_bucket(Bucket=bucket)
            return True
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in MISSING_BUCKET_CODES:
                return False
            raise TransportError(
                f"Failed to check bucket {bucket}: {e}", service="quarantine"
            ) from e
        except BotoCoreError as e:
            raise TransportError(
                f"Failed to check bucket {bucket}: {e}", service="quarantine"
            ) from e

    def put_object(
        self,
        bucket: str,
        key: str,
        stream: BinaryIO,
        content_type: str,
        content_length: int,
    ) -> None:
        """
        Upload a stream as one object.

        Args:
            bucket: Bucket name
            key: Object key
            stream: Readable binary stream positioned at the first byte
            content_type: Content type stored with the object
            content_length: Exact number of bytes to upload

        Raises:
            TransportError: Upload failed
        """
        try:
            self._s3_client.put_object(
                Bucket=bucket,
                Key=key,
                Body=stream,
                ContentType=content_type,
                ContentLength=content_length,
            )
        except (ClientError, BotoCoreError) as e:
            raise TransportError(
                f"Failed to upload {key} to {bucket}: {e}", service="quarantine"
            ) from e
