"""
Search index (OpenSearch) configuration.

Dependencies: pydantic_settings
System role: Search index client configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchIndexSettings(BaseSettings):
    """Settings for the OpenSearch document index."""

    model_config = SettingsConfigDict(
        env_prefix="SEARCH_INDEX_",
        case_sensitive=False,
        extra="ignore",
    )

    endpoint: str = Field(
        default="",
        description="OpenSearch domain endpoint (https://...)",
    )
    index_name: str = Field(
        default="wf-document-index",
        description="Index receiving document content and metadata",
    )
    region: str = Field(
        default="ca-central-1",
        description="AWS region used for SigV4 request signing",
    )
    sign_requests: bool = Field(
        default=True,
        description="Sign requests with the Lambda role credentials (service 'es')",
    )
    timeout_seconds: float = Field(
        default=30.0,
        description="HTTP timeout for index requests",
    )
