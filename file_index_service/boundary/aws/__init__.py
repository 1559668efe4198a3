"""
AWS boundary modules.

Exports: QuarantineBucketClient, SecretsClient
"""

from .s3_client import QuarantineBucketClient
from .secrets_client import SecretsClient

__all__ = ["QuarantineBucketClient", "SecretsClient"]
