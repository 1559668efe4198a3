"""
Document store client credentials.

Dependencies: pydantic
System role: Caller credentials passed into every pipeline run
"""

from pydantic import BaseModel, ConfigDict, SecretStr


class ClientCredentials(BaseModel):
    """OAuth client credentials for the document store."""

    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: SecretStr
