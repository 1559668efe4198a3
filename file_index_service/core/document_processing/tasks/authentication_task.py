"""
Authentication task.

Obtains a fresh document store token for every message. Tokens are never
cached across messages so a run cannot start with a token that expires or
is revoked mid-batch.

Dependencies: boundary.document_store
System role: Stage 1 of the document indexing pipeline
"""

from file_index_service.boundary.document_store import DocumentStoreClient
from file_index_service.core.document_processing.models import ClientCredentials
from file_index_service.core.exceptions import AuthError


class AuthenticationTask:
    """Fetch a client-credentials token from the document store."""

    def __init__(self, client: DocumentStoreClient, credentials: ClientCredentials) -> None:
        self._client = client
        self._credentials = credentials

    def authenticate(self) -> str:
        """
        Obtain an access token.

        Returns:
            str: Access token

        Raises:
            AuthError: The store returned no token
            TransportError: Token endpoint unreachable
        """
        token = self._client.get_access_token(
            self._credentials.client_id,
            self._credentials.client_secret.get_secret_value(),
        )
        if not token:
            raise AuthError(
                "Could not authorize access to the document store",
                details={"client_id": self._credentials.client_id},
            )
        return token
