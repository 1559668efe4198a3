"""
Secrets Manager client.

Reads the document store client credentials from a JSON secret so they do
not have to live in Lambda environment variables.

Dependencies: boto3
System role: Credential resolution at Lambda start-up
"""

import json
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from file_index_service.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


class SecretsClient:
    """Fetch JSON secrets from AWS Secrets Manager."""

    def __init__(self, region: str | None = None, client=None) -> None:
        """
        Initialize Secrets Manager client.

        Args:
            region: AWS region (defaults to the Lambda region)
            client: Preconfigured boto3 client (tests inject a mock)
        """
        if client is None:
            session = boto3.session.Session()
            client = session.client("secretsmanager", region_name=region)
        self._client = client

    def get_json_secret(self, secret_arn: str) -> dict:
        """
        Fetch and decode a JSON secret.

        Args:
            secret_arn: Secret ARN or name

        Returns:
            dict: Decoded secret

        Raises:
            ConfigError: Secret missing, unreadable or not a JSON object
        """
        try:
            response = self._client.get_secret_value(SecretId=secret_arn)
        except (ClientError, BotoCoreError) as e:
            raise ConfigError(
                f"Failed to read secret: {e}", details={"secret_arn": secret_arn}
            ) from e

        secret_string = response.get("SecretString")
        if not secret_string:
            raise ConfigError("Secret has no string value", details={"secret_arn": secret_arn})

        try:
            secret = json.loads(secret_string)
        except json.JSONDecodeError as e:
            raise ConfigError(
                "Secret is not valid JSON", details={"secret_arn": secret_arn}
            ) from e
        if not isinstance(secret, dict):
            raise ConfigError("Secret must be a JSON object", details={"secret_arn": secret_arn})

        logger.info("get_json_secret - Secret loaded", extra={"secret_keys": sorted(secret)})
        return secret
