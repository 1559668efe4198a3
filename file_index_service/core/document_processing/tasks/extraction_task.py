"""
Text extraction task.

Runs a mime-type specific LangChain blob parser over the document bytes.
Only mime types on the configured allow-list are extracted; everything else
is indexed with empty content.

Dependencies: langchain_core, langchain_community (pypdf, unstructured for msword)
System role: Stage 5 of the document indexing pipeline
"""

import logging
from collections.abc import Iterator, Mapping
from typing import BinaryIO

from langchain_community.document_loaders.parsers.msword import MsWordParser
from langchain_community.document_loaders.parsers.pdf import PyPDFParser
from langchain_core.document_loaders import BaseBlobParser, Blob
from langchain_core.documents import Document

from file_index_service.core.exceptions import ExtractionError

logger = logging.getLogger(__name__)


class PlainTextParser(BaseBlobParser):
    """Decode text blobs, replacing bytes that are not valid in the encoding."""

    def lazy_parse(self, blob: Blob) -> Iterator[Document]:
        text = blob.as_bytes().decode(blob.encoding or "utf-8", errors="replace")
        yield Document(page_content=text, metadata={"source": blob.source})


def default_parsers() -> dict[str, BaseBlobParser]:
    """Parsers for the default allow-list."""
    return {
        "text/plain": PlainTextParser(),
        "application/pdf": PyPDFParser(),
        "application/msword": MsWordParser(),
    }


def normalize_text(text: str) -> str:
    """Strip null bytes and collapse long runs of blank lines."""
    if not text:
        return ""
    text = text.replace("\x00", "")
    while "\n\n\n\n" in text:
        text = text.replace("\n\n\n\n", "\n\n\n")
    return text.strip()


class ExtractionTask:
    """Extract plain text from eligible documents."""

    def __init__(
        self,
        eligible_mime_types: list[str],
        parsers: Mapping[str, BaseBlobParser] | None = None,
    ) -> None:
        """
        Initialize extraction task.

        Args:
            eligible_mime_types: Allow-list of mime types to extract
            parsers: Parser per mime type (defaults to text, PDF and Word parsers)
        """
        self._eligible = {mime.lower() for mime in eligible_mime_types}
        self._parsers = {k.lower(): v for k, v in (parsers or default_parsers()).items()}

    def is_eligible(self, mime_type: str) -> bool:
        """Whether a mime type is on the extraction allow-list."""
        return mime_type.strip().lower() in self._eligible

    def extract(self, stream: BinaryIO, mime_type: str, source: str | None = None) -> str:
        """
        Extract text from a document stream.

        The stream is rewound before reading; callers reading it afterwards
        must rewind again.

        Args:
            stream: Seekable document byte stream
            mime_type: Content type of the bytes (must be eligible)
            source: Path or name recorded on the parsed documents

        Returns:
            str: Normalised plain text

        Raises:
            ExtractionError: No parser for the type, or the parser rejected the content
        """
        mime = mime_type.strip().lower()
        parser = self._parsers.get(mime)
        if parser is None:
            raise ExtractionError("No parser registered for mime type", mime_type=mime)

        try:
            stream.seek(0)
            blob = Blob.from_data(stream.read(), mime_type=mime, path=source)
            pages = parser.parse(blob)
        except Exception as e:
            raise ExtractionError(
                f"Failed to extract content: {type(e).__name__}: {e}",
                mime_type=mime,
            ) from e

        text = normalize_text("\n\n".join(page.page_content for page in pages))
        logger.info(
            "extract - Content extracted",
            extra={"mime_type": mime, "page_count": len(pages), "content_chars": len(text)},
        )
        return text
