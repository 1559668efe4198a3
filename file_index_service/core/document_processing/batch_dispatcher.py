"""
Batch dispatcher.

Runs every message of one SQS delivery through the document pipeline in
isolation and collects the failures into a BatchOutcome. This is the error
boundary of the batch: any Exception raised for a message becomes exactly
one batch item failure for that message and never reaches sibling messages
or the caller. BaseException subclasses that are not Exceptions (Lambda
shutdown, KeyboardInterrupt) are left to propagate.

Dependencies: concurrent.futures, observability
System role: Batch orchestration and queue redelivery contract
"""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from file_index_service.observability.correlation import message_scope
from file_index_service.observability.log_utils import log_event, log_failure, truncate

from .entrypoint import DocumentPipeline
from .models import BatchOutcome, InboundMessage

logger = logging.getLogger(__name__)


class BatchDispatcher:
    """Process a batch of messages and report the ones to redeliver."""

    def __init__(self, pipeline: DocumentPipeline, max_concurrency: int = 1) -> None:
        """
        Initialize dispatcher.

        Args:
            pipeline: Document pipeline shared by all messages of the batch
            max_concurrency: Maximum pipelines in flight (1 = sequential)
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._pipeline = pipeline
        self._max_concurrency = max_concurrency

    def process_batch(self, messages: Sequence[InboundMessage] | None) -> BatchOutcome:
        """
        Process every message and collect failures.

        Args:
            messages: Messages of one delivery batch (None or empty is allowed)

        Returns:
            BatchOutcome: Failed message IDs; everything else is acknowledged
        """
        outcome = BatchOutcome()
        if not messages:
            logger.info("process_batch - No messages to handle")
            return outcome

        logger.info(
            "process_batch - Received batch",
            extra={"record_count": len(messages), "max_concurrency": self._max_concurrency},
        )

        if self._max_concurrency == 1 or len(messages) == 1:
            for message in messages:
                self._process_message(message, outcome)
        else:
            workers = min(self._max_concurrency, len(messages))
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="doc-pipeline") as executor:
                futures = [
                    executor.submit(self._process_message, message, outcome)
                    for message in messages
                ]
                for future in futures:
                    future.result()

        failed_count = len(outcome.batch_item_failures)
        logger.info(
            "process_batch - Close SQS batch",
            extra={"success_count": len(messages) - failed_count, "failed_count": failed_count},
        )
        return outcome

    def _process_message(self, message: InboundMessage, outcome: BatchOutcome) -> None:
        with message_scope(message.id):
            log_event(
                logger,
                "_process_message - SQS message received",
                message_id=message.id,
                body=truncate(message.body),
            )
            try:
                result = self._pipeline.process(message)
            except Exception as e:  # pylint: disable=broad-except
                log_failure(logger, message.id, e)
                outcome.add_failure(message.id)
                return

            log_event(
                logger,
                "_process_message - Document processed successfully",
                message_id=message.id,
                document_id=result.document_id,
                content_chars=result.content_chars,
                scan_flag_set=result.scan_flag_set,
                processing_time_ms=round(result.processing_time_ms, 1),
            )
