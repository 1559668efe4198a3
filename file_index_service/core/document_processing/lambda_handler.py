"""
Lambda handler for SQS-triggered document indexing.

Each SQS message names a document in the document store. The handler runs
the batch through the pipeline and returns the Lambda partial batch
response, so only failed messages are redelivered:

    {"batchItemFailures": [{"itemIdentifier": "<messageId>"}, ...]}

The event source mapping must enable ``ReportBatchItemFailures``.

Environment variables: see file_index_service.configs and
DocumentPipelineSettings (DOC_PIPELINE_*).

Dependencies: batch_dispatcher, entrypoint, lambda_utils, configs
System role: Lambda entry point for document indexing
"""

import logging
from typing import Any, Dict

from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

from file_index_service.configs import Settings
from file_index_service.core.exceptions import FileIndexError
from file_index_service.observability.logger import configure_logging

from .batch_dispatcher import BatchDispatcher
from .configs import DocumentPipelineSettings
from .entrypoint import DocumentPipeline
from .lambda_utils.config import load_settings, resolve_credentials, validate_environment
from .lambda_utils.event_parser import parse_sqs_event
from .models import BatchOutcome, ClientCredentials, InboundMessage

logger = logging.getLogger(__name__)

_credentials: ClientCredentials | None = None
_logging_configured = False


def _configure_logging_once(settings: Settings | None) -> None:
    global _logging_configured
    if _logging_configured:
        return
    configure_logging(settings.effective_log_level if settings else "INFO")
    _logging_configured = True


def _get_credentials(settings: Settings) -> ClientCredentials:
    """Resolve credentials once per container."""
    global _credentials
    if _credentials is None:
        _credentials = resolve_credentials(settings)
    return _credentials


def _build_pipeline(
    settings: Settings, pipeline_settings: DocumentPipelineSettings
) -> DocumentPipeline:
    validate_environment(settings)
    return DocumentPipeline.from_settings(
        settings,
        credentials=_get_credentials(settings),
        pipeline_settings=pipeline_settings,
    )


def _fail_all(messages: list[InboundMessage]) -> BatchOutcome:
    outcome = BatchOutcome()
    for message in messages:
        outcome.add_failure(message.id)
    return outcome


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for SQS document indexing events.

    Args:
        event: SQS event with Records array
        context: Lambda context object

    Returns:
        Dict: Partial batch response naming the messages to retry
    """
    settings = pipeline_settings = None
    config_error: FileIndexError | None = None
    try:
        settings, pipeline_settings = load_settings()
    except FileIndexError as e:
        config_error = e
    _configure_logging_once(settings)

    messages = parse_sqs_event(event)
    if not messages:
        logger.info("handler - No messages to handle")
        return BatchOutcome().to_response()

    if config_error is None:
        try:
            pipeline = _build_pipeline(settings, pipeline_settings)
        except FileIndexError as e:
            config_error = e

    if config_error is not None:
        # Without configuration no message can succeed; retry them all
        logger.error("handler - %s: %s", type(config_error).__name__, config_error)
        return _fail_all(messages).to_response()

    try:
        dispatcher = BatchDispatcher(pipeline, max_concurrency=pipeline_settings.max_concurrency)
        outcome = dispatcher.process_batch(messages)
    finally:
        pipeline.close()

    return outcome.to_response()
