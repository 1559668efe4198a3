"""
Document metadata model.

Parsed from the JSON returned by the document store's metadata endpoint.
Only the fields the pipeline needs are typed; everything else is preserved
so it can be forwarded to the search index and back to the store.

Dependencies: pydantic
System role: Data validation for document store payloads
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from file_index_service.core.exceptions import ParseError


class DocumentMetadata(BaseModel):
    """Metadata describing one document in the store."""

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "fileId": "1027384",
                "mimeType": "application/pdf",
                "filePath": "/WFIM/Incidents/2024/report.pdf",
                "contentLength": 48213,
            }
        },
    )

    mime_type: str = Field(..., alias="mimeType", description="Content type of the stored bytes")
    file_path: str = Field(..., alias="filePath", description="Absolute path inside the store")
    content_length: int = Field(..., alias="contentLength", ge=0, description="Size in bytes")
    file_id: str | None = Field(default=None, alias="fileId", description="Store identifier")

    @field_validator("mime_type", "file_path")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()

    @field_validator("file_id", mode="before")
    @classmethod
    def _coerce_file_id(cls, value: Any) -> Any:
        # The store returns numeric IDs for some document types
        if isinstance(value, int):
            return str(value)
        return value

    @property
    def file_name(self) -> str:
        """Last segment of ``file_path``."""
        return self.file_path.rsplit("/", 1)[-1]

    def to_payload(self) -> dict[str, Any]:
        """Return the metadata in the store's wire format, extra fields included."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_payload(cls, payload: Any) -> "DocumentMetadata":
        """
        Parse a metadata payload.

        Args:
            payload: Decoded JSON object from the metadata endpoint

        Returns:
            DocumentMetadata: Validated metadata

        Raises:
            ParseError: Payload is not an object or misses/mistypes required fields
        """
        if not isinstance(payload, dict):
            raise ParseError(
                "Document metadata payload must be a JSON object",
                details={"payload_type": type(payload).__name__},
            )
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first.get("loc", ()))
            raise ParseError(
                f"Malformed document metadata: {first.get('msg')}",
                field=field or None,
                details={"error_count": e.error_count()},
            ) from e
