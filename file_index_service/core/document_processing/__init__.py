"""
Document indexing pipeline.

Lambda-ready module that indexes documents named by SQS messages and queues
their raw bytes for malware scanning.

Dependencies: httpx, boto3, langchain_community, pydantic
System role: Document indexing entrypoint
"""

from .batch_dispatcher import BatchDispatcher
from .configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from .entrypoint import DocumentPipeline
from .models import BatchOutcome, InboundMessage, PipelineResult
from .resource_guard import StreamGuard

__all__ = [
    "BatchDispatcher",
    "DocumentPipeline",
    "DocumentPipelineSettings",
    "get_pipeline_settings",
    "BatchOutcome",
    "InboundMessage",
    "PipelineResult",
    "StreamGuard",
]
