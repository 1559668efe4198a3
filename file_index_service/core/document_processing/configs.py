"""
Configuration settings for the document indexing pipeline.

Dependencies: pydantic, pydantic_settings
System role: Pipeline policy configuration
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ELIGIBLE_MIME_TYPES = [
    "text/plain",
    "application/msword",
    "application/pdf",
]


class DocumentPipelineSettings(BaseSettings):
    """Settings for the document indexing pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="DOC_PIPELINE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Set as a JSON list, e.g. DOC_PIPELINE_ELIGIBLE_MIME_TYPES='["text/plain"]'
    eligible_mime_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ELIGIBLE_MIME_TYPES),
        description="Mime types whose content is extracted and indexed",
    )
    strict_scan_status: bool = Field(
        default=False,
        description="Fail the message when the scan-pending flag cannot be recorded",
    )
    max_concurrency: int = Field(
        default=1,
        ge=1,
        le=32,
        description="Maximum pipelines in flight per batch (1 = sequential)",
    )

    @field_validator("eligible_mime_types")
    @classmethod
    def _normalise_mime_types(cls, value: list[str]) -> list[str]:
        return [mime.strip().lower() for mime in value if mime.strip()]


@lru_cache
def get_pipeline_settings() -> DocumentPipelineSettings:
    """
    Get cached pipeline settings instance.

    Returns:
        DocumentPipelineSettings: Singleton settings loaded from environment
    """
    return DocumentPipelineSettings()
