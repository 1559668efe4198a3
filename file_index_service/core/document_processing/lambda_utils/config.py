"""
Configuration and secrets management utilities for Lambda.
"""

import logging

from pydantic import ValidationError

from file_index_service.boundary.aws import SecretsClient
from file_index_service.configs import Settings, get_settings
from file_index_service.core.document_processing.configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from file_index_service.core.document_processing.models import ClientCredentials
from file_index_service.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_settings() -> tuple[Settings, DocumentPipelineSettings]:
    """
    Read service and pipeline settings from the environment.

    Raises:
        ConfigError: A variable is set to a value that fails validation
    """
    try:
        return get_settings(), get_pipeline_settings()
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigError(
            f"Invalid configuration: {first.get('msg')}",
            details={"field": field, "error_count": e.error_count()},
        ) from e


def validate_environment(settings: Settings) -> None:
    """
    Validate that every collaborator endpoint is configured.

    Raises:
        ConfigError: One or more required settings are empty
    """
    required = {
        "DOCUMENT_STORE_BASE_URL": settings.document_store.base_url,
        "DOCUMENT_STORE_TOKEN_URL": settings.document_store.token_url,
        "SEARCH_INDEX_ENDPOINT": settings.search_index.endpoint,
        "QUARANTINE_BUCKET": settings.quarantine.bucket,
    }
    missing = [name for name, value in required.items() if not value]

    store = settings.document_store
    if not store.secret_arn and not (store.client_id and store.client_secret):
        missing.append("DOCUMENT_STORE_SECRET_ARN or DOCUMENT_STORE_CLIENT_ID/DOCUMENT_STORE_CLIENT_SECRET")

    if missing:
        raise ConfigError(
            f"Missing required environment variables: {', '.join(missing)}",
            details={"missing": missing},
        )

    logger.info("validate_environment - Environment validated")


def resolve_credentials(
    settings: Settings, secrets_client: SecretsClient | None = None
) -> ClientCredentials:
    """
    Resolve document store client credentials.

    A Secrets Manager secret (``client_id``/``client_secret`` keys) takes
    precedence over plain environment variables.

    Raises:
        ConfigError: Secret unreadable or missing keys
    """
    store = settings.document_store
    if not store.secret_arn:
        return ClientCredentials(client_id=store.client_id, client_secret=store.client_secret)

    client = secrets_client or SecretsClient()
    secret = client.get_json_secret(store.secret_arn)
    client_id = secret.get("client_id")
    client_secret = secret.get("client_secret")
    if not client_id or not client_secret:
        raise ConfigError(
            "Document store secret must contain client_id and client_secret",
            details={"secret_arn": store.secret_arn},
        )

    logger.info("resolve_credentials - Loaded document store credentials from secret")
    return ClientCredentials(client_id=client_id, client_secret=client_secret)
