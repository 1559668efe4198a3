"""
Document pipeline orchestrator.

Runs one queue message through the indexing stages:
authenticate -> fetch metadata -> open stream -> mark scan pending ->
extract (allow-listed mime types only) -> index -> quarantine upload.

Each stage's output gates the next. Any stage failure propagates as a typed
error; the batch dispatcher turns it into a batch item failure. Nothing is
retried here, redelivery belongs to the queue.

Dependencies: All task modules, boundary clients, configs
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time
from urllib.parse import urlparse

from file_index_service.boundary.aws import QuarantineBucketClient
from file_index_service.boundary.document_store import DocumentStoreClient
from file_index_service.boundary.search import OpenSearchIndexClient
from file_index_service.configs import Settings

from .configs import DocumentPipelineSettings
from .lambda_utils.event_parser import resolve_document_id
from .models import ClientCredentials, InboundMessage, PipelineResult
from .resource_guard import StreamGuard
from .tasks import (
    AuthenticationTask,
    ExtractionTask,
    IndexingTask,
    MetadataTask,
    QuarantineTask,
    ScanStatusTask,
)

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Orchestrate document indexing for one message at a time."""

    def __init__(
        self,
        document_store: DocumentStoreClient,
        index_client: OpenSearchIndexClient,
        bucket_client: QuarantineBucketClient,
        credentials: ClientCredentials,
        quarantine_bucket: str,
        pipeline_settings: DocumentPipelineSettings | None = None,
        extraction_task: ExtractionTask | None = None,
        allowed_host: str | None = None,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            document_store: Document store client
            index_client: Search index client
            bucket_client: Quarantine bucket client
            credentials: Document store client credentials
            quarantine_bucket: Quarantine bucket name
            pipeline_settings: Pipeline policy (uses defaults if None)
            extraction_task: Preconfigured extraction task (built from settings if None)
            allowed_host: Host that URL message bodies must point at
        """
        self._settings = pipeline_settings or DocumentPipelineSettings()
        self._document_store = document_store
        self._index_client = index_client
        self._allowed_host = allowed_host

        self._authentication_task = AuthenticationTask(document_store, credentials)
        self._metadata_task = MetadataTask(document_store)
        self._scan_status_task = ScanStatusTask(
            document_store, strict=self._settings.strict_scan_status
        )
        self._extraction_task = extraction_task or ExtractionTask(
            eligible_mime_types=self._settings.eligible_mime_types,
        )
        self._indexing_task = IndexingTask(index_client)
        self._quarantine_task = QuarantineTask(bucket_client, quarantine_bucket)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        credentials: ClientCredentials,
        pipeline_settings: DocumentPipelineSettings | None = None,
    ) -> "DocumentPipeline":
        """Build a pipeline and its boundary clients from process-wide settings."""
        store = settings.document_store
        index = settings.search_index
        return cls(
            document_store=DocumentStoreClient(
                base_url=store.base_url,
                token_url=store.token_url,
                timeout=store.timeout_seconds,
                scan_status_metadata_name=store.scan_status_metadata_name,
                scan_status_pending_value=store.scan_status_pending_value,
            ),
            index_client=OpenSearchIndexClient(
                endpoint=index.endpoint,
                index_name=index.index_name,
                region=index.region,
                sign_requests=index.sign_requests,
                timeout=index.timeout_seconds,
            ),
            bucket_client=QuarantineBucketClient(region=settings.quarantine.region),
            credentials=credentials,
            quarantine_bucket=settings.quarantine.bucket,
            pipeline_settings=pipeline_settings,
            allowed_host=urlparse(store.base_url).hostname,
        )

    def close(self) -> None:
        """Release HTTP connection pools."""
        self._document_store.close()
        self._index_client.close()

    def process(self, message: InboundMessage) -> PipelineResult:
        """
        Process one message through the full pipeline.

        Args:
            message: Inbound queue message

        Returns:
            PipelineResult: Summary of the successful run

        Raises:
            MessageParseError: Body is not a document reference
            AuthError: No token issued
            NotFoundError: Document unknown to the store
            ParseError: Metadata malformed
            ExtractionError: Parser rejected eligible content
            IndexingError: Search index failure
            ConfigError: Quarantine bucket missing
            TransportError: Network failure to any collaborator
            ScanStatusError: Scan flag not recorded (strict mode only)
        """
        start_time = time.perf_counter()
        document_id = resolve_document_id(message.body, allowed_host=self._allowed_host)

        logger.info("process - Authenticating", extra={"document_id": document_id})
        token = self._authentication_task.authenticate()

        logger.info("process - Fetching metadata", extra={"document_id": document_id})
        metadata = self._metadata_task.fetch(token, document_id)
        logger.info(
            "process - File found in document store",
            extra={
                "document_id": document_id,
                "mime_type": metadata.mime_type,
                "content_length": metadata.content_length,
            },
        )

        guard = StreamGuard(
            lambda: self._document_store.open_content_stream(token, document_id),
            document_id=document_id,
        )
        with guard as stream:
            scan_flag_set = self._scan_status_task.mark_pending(
                token, document_id, metadata.to_payload()
            )

            content = ""
            extracted = self._extraction_task.is_eligible(metadata.mime_type)
            if extracted:
                logger.info("process - Extracting content", extra={"mime_type": metadata.mime_type})
                content = self._extraction_task.extract(
                    stream, metadata.mime_type, source=metadata.file_path
                )
            else:
                logger.info(
                    "process - Mime type %s is not extracted for indexing, skipping parse",
                    metadata.mime_type,
                    extra={"document_id": document_id},
                )

            logger.info("process - Indexing", extra={"document_id": document_id})
            self._indexing_task.index(document_id, content, metadata)

            logger.info("process - Scheduling virus scan", extra={"document_id": document_id})
            quarantine_key = self._quarantine_task.upload(
                key=document_id,
                stream=stream,
                content_type=metadata.mime_type,
                content_length=metadata.content_length,
            )

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        return PipelineResult(
            message_id=message.id,
            document_id=document_id,
            file_name=metadata.file_name,
            mime_type=metadata.mime_type,
            content_extracted=extracted,
            content_chars=len(content),
            scan_flag_set=scan_flag_set,
            quarantine_key=quarantine_key,
            processing_time_ms=elapsed_ms,
        )
