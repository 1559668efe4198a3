"""Tests for environment-driven configuration."""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from file_index_service.configs import Settings, get_settings
from file_index_service.core.document_processing.configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from file_index_service.core.document_processing.lambda_utils.config import (
    load_settings,
    resolve_credentials,
    validate_environment,
)
from file_index_service.core.exceptions import ConfigError


@pytest.fixture
def configured_env(monkeypatch):
    """Minimal environment for a working deployment."""
    monkeypatch.setenv("DOCUMENT_STORE_BASE_URL", "https://wfdm.example.gov/wfdm-document-api")
    monkeypatch.setenv("DOCUMENT_STORE_TOKEN_URL", "https://auth.example.gov/token")
    monkeypatch.setenv("DOCUMENT_STORE_CLIENT_ID", "client")
    monkeypatch.setenv("DOCUMENT_STORE_CLIENT_SECRET", "secret")
    monkeypatch.setenv("DOCUMENT_STORE_SECRET_ARN", "")
    monkeypatch.setenv("SEARCH_INDEX_ENDPOINT", "https://search.example.gov")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        """Should fall back to the documented defaults."""
        for name in ("QUARANTINE_BUCKET", "SEARCH_INDEX_INDEX_NAME", "SEARCH_INDEX_SIGN_REQUESTS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.quarantine.bucket == "wfdm-clamav-bucket"
        assert settings.search_index.index_name == "wf-document-index"
        assert settings.search_index.sign_requests is True
        assert settings.document_store.scan_status_metadata_name == "WFDMVirusScanStatus"

    def test_reads_prefixed_environment(self, configured_env, monkeypatch) -> None:
        """Should map prefixed environment variables onto nested settings."""
        monkeypatch.setenv("QUARANTINE_BUCKET", "other-bucket")
        monkeypatch.setenv("SEARCH_INDEX_SIGN_REQUESTS", "false")

        settings = get_settings()

        assert settings.document_store.base_url.startswith("https://wfdm")
        assert settings.quarantine.bucket == "other-bucket"
        assert settings.search_index.sign_requests is False

    def test_get_settings_is_cached(self, configured_env) -> None:
        """Should return the same instance until the cache is cleared."""
        assert get_settings() is get_settings()


class TestPipelineSettings:
    def test_mime_types_normalised(self) -> None:
        """Should lower-case and strip configured mime types."""
        settings = DocumentPipelineSettings(eligible_mime_types=[" Text/Plain ", "", "APPLICATION/PDF"])

        assert settings.eligible_mime_types == ["text/plain", "application/pdf"]

    def test_mime_types_from_environment(self, monkeypatch) -> None:
        """Should parse the allow-list from a JSON environment value."""
        monkeypatch.setenv("DOC_PIPELINE_ELIGIBLE_MIME_TYPES", '["text/plain"]')

        assert DocumentPipelineSettings().eligible_mime_types == ["text/plain"]

    @pytest.mark.parametrize("value", [0, 33])
    def test_concurrency_bounds(self, value) -> None:
        """Should reject concurrency outside 1..32."""
        with pytest.raises(ValidationError):
            DocumentPipelineSettings(max_concurrency=value)


class TestValidateEnvironment:
    def test_complete_environment_passes(self, configured_env) -> None:
        """Should accept a fully configured environment."""
        validate_environment(get_settings())

    def test_missing_values_listed(self, configured_env, monkeypatch) -> None:
        """Should name every missing variable."""
        monkeypatch.setenv("SEARCH_INDEX_ENDPOINT", "")
        monkeypatch.setenv("DOCUMENT_STORE_CLIENT_SECRET", "")
        get_settings.cache_clear()

        with pytest.raises(ConfigError) as exc_info:
            validate_environment(get_settings())

        missing = exc_info.value.details["missing"]
        assert "SEARCH_INDEX_ENDPOINT" in missing
        assert any("DOCUMENT_STORE_CLIENT_SECRET" in name for name in missing)

    def test_secret_arn_satisfies_credentials(self, configured_env, monkeypatch) -> None:
        """Should accept a secret ARN in place of inline credentials."""
        monkeypatch.setenv("DOCUMENT_STORE_CLIENT_ID", "")
        monkeypatch.setenv("DOCUMENT_STORE_CLIENT_SECRET", "")
        monkeypatch.setenv("DOCUMENT_STORE_SECRET_ARN", "arn:aws:secretsmanager:ca-central-1:1:secret:wfdm")
        get_settings.cache_clear()

        validate_environment(get_settings())


class TestResolveCredentials:
    def test_environment_credentials(self, configured_env) -> None:
        """Should use inline credentials when no secret is configured."""
        credentials = resolve_credentials(get_settings())

        assert credentials.client_id == "client"
        assert credentials.client_secret.get_secret_value() == "secret"

    def test_secret_takes_precedence(self, configured_env, monkeypatch) -> None:
        """Should prefer the secret over inline credentials."""
        monkeypatch.setenv("DOCUMENT_STORE_SECRET_ARN", "arn:secret")
        get_settings.cache_clear()
        secrets = MagicMock()
        secrets.get_json_secret.return_value = {"client_id": "from-secret", "client_secret": "pw"}

        credentials = resolve_credentials(get_settings(), secrets_client=secrets)

        assert credentials.client_id == "from-secret"
        secrets.get_json_secret.assert_called_once_with("arn:secret")

    def test_incomplete_secret_raises(self, configured_env, monkeypatch) -> None:
        """Should raise ConfigError when the secret lacks a key."""
        monkeypatch.setenv("DOCUMENT_STORE_SECRET_ARN", "arn:secret")
        get_settings.cache_clear()
        secrets = MagicMock()
        secrets.get_json_secret.return_value = {"client_id": "from-secret"}

        with pytest.raises(ConfigError):
            resolve_credentials(get_settings(), secrets_client=secrets)


class TestLoadSettings:
    @pytest.fixture(autouse=True)
    def _clear_caches(self):
        get_settings.cache_clear()
        get_pipeline_settings.cache_clear()
        yield
        get_settings.cache_clear()
        get_pipeline_settings.cache_clear()

    def test_returns_both_settings(self, configured_env) -> None:
        """Should return service and pipeline settings."""
        settings, pipeline_settings = load_settings()

        assert settings.search_index.endpoint == "https://search.example.gov"
        assert pipeline_settings.max_concurrency == 1

    def test_invalid_value_raises_config_error(self, monkeypatch) -> None:
        """Should translate validation failures into ConfigError."""
        monkeypatch.setenv("DOC_PIPELINE_MAX_CONCURRENCY", "64")

        with pytest.raises(ConfigError) as exc_info:
            load_settings()

        assert exc_info.value.details["field"] == "max_concurrency"
        assert isinstance(exc_info.value.__cause__, ValidationError)

    @pytest.mark.parametrize(
        "env,expected",
        [
            ({"LOG_LEVEL": "warning"}, "WARNING"),
            ({"LOG_LEVEL": "warning", "DEBUG": "true"}, "DEBUG"),
        ],
    )
    def test_effective_log_level(self, monkeypatch, env, expected) -> None:
        """Should normalise the level and let debug override it."""
        monkeypatch.delenv("DEBUG", raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)

        assert Settings().effective_log_level == expected
