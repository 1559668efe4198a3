"""
Models for the document indexing pipeline.

Exports: InboundMessage, SQSRecord, SQSEvent, DocumentMetadata,
BatchItemFailure, BatchOutcome, PipelineResult, ClientCredentials
"""

from .batch_outcome import BatchItemFailure, BatchOutcome
from .credentials import ClientCredentials
from .document_metadata import DocumentMetadata
from .pipeline_result import PipelineResult
from .sqs_event import InboundMessage, SQSEvent, SQSRecord

__all__ = [
    "InboundMessage",
    "SQSRecord",
    "SQSEvent",
    "DocumentMetadata",
    "BatchItemFailure",
    "BatchOutcome",
    "PipelineResult",
    "ClientCredentials",
]
