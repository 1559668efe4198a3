"""
Document store (WFDM) configuration.

Endpoints and client credentials for the file-management API that owns the
documents referenced by queue messages.

Dependencies: pydantic_settings
System role: Document store client configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentStoreSettings(BaseSettings):
    """Settings for the document store API."""

    model_config = SettingsConfigDict(
        env_prefix="DOCUMENT_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="",
        description="Base URL of the document API (e.g. https://host/wfdm-document-api)",
    )
    token_url: str = Field(
        default="",
        description="OAuth token endpoint issuing client-credentials tokens",
    )
    client_id: str = Field(
        default="",
        description="OAuth client ID",
    )
    client_secret: str = Field(
        default="",
        description="OAuth client secret",
    )
    secret_arn: str = Field(
        default="",
        description="Secrets Manager ARN holding client_id/client_secret (overrides the fields above)",
    )
    timeout_seconds: float = Field(
        default=30.0,
        description="HTTP timeout for document store calls",
    )
    scan_status_metadata_name: str = Field(
        default="WFDMVirusScanStatus",
        description="Metadata entry recording the malware scan status",
    )
    scan_status_pending_value: str = Field(
        default="PENDING",
        description="Value written while a scan is outstanding",
    )
