"""
Quarantine bucket configuration.

Settings for the S3 bucket that holds raw document bytes until the malware
scanner picks them up.

Dependencies: pydantic_settings
System role: Quarantine storage configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class QuarantineSettings(BaseSettings):
    """Settings for the quarantine bucket."""

    model_config = SettingsConfigDict(
        env_prefix="QUARANTINE_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="wfdm-clamav-bucket",
        description="S3 bucket scanned by the malware scanner",
    )
    region: str = Field(
        default="ca-central-1",
        description="AWS region for the quarantine bucket",
    )
