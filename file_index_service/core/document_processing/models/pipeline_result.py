"""
Pipeline result model for document indexing.

Represents the outcome of processing one message through the pipeline.

Dependencies: pydantic
System role: Return type for DocumentPipeline.process()
"""

from pydantic import BaseModel, Field


class PipelineResult(BaseModel):
    """Result of a successful pipeline run."""

    message_id: str = Field(description="SQS message ID")
    document_id: str = Field(description="Document identifier in the store")
    file_name: str = Field(description="Indexed file name")
    mime_type: str = Field(description="Document content type")
    content_extracted: bool = Field(description="Whether text extraction ran")
    content_chars: int = Field(default=0, description="Length of the extracted text")
    scan_flag_set: bool = Field(description="Whether the scan-pending flag was recorded")
    quarantine_key: str = Field(description="Object key in the quarantine bucket")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
