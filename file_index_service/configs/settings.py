"""
Unified application settings.

Aggregates all configuration modules into a single Settings class, resolved
once per Lambda container and passed explicitly into the pipeline.

Dependencies: All config modules
System role: Central configuration aggregator for the service
"""

from functools import lru_cache

from pydantic import Field

from file_index_service.configs.base import BaseSettings
from file_index_service.configs.document_store import DocumentStoreSettings
from file_index_service.configs.quarantine import QuarantineSettings
from file_index_service.configs.search_index import SearchIndexSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    document_store: DocumentStoreSettings = Field(default_factory=DocumentStoreSettings)
    search_index: SearchIndexSettings = Field(default_factory=SearchIndexSettings)
    quarantine: QuarantineSettings = Field(default_factory=QuarantineSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once per container; call
    ``get_settings.cache_clear()`` after changing them (tests, secret refresh).

    Returns:
        Settings: Application settings instance
    """
    return Settings()
