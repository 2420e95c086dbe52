"""PDF text extraction using pypdf.

Turns uploaded document bytes into the plain text that is injected into
every later prompt.
"""

import io
import logging

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"
PDF_MIME_TYPE = "application/pdf"

FRAGMENT_SEPARATOR = " "
PAGE_SEPARATOR = "\n"


class PDFContent(BaseModel):
    """Extracted content from a PDF file.

    Attributes:
        text: Text of all pages, one line per page, in page order.
        pages: Total number of pages in the document.
        metadata: Document metadata (title, author, etc.).
    """

    text: str
    pages: int = Field(ge=1)
    metadata: dict[str, str] = Field(default_factory=dict)


class ExtractionError(Exception):
    """Raised when document bytes cannot be turned into text."""


def is_supported_upload(content_type: str | None) -> bool:
    """Return True if an upload with this MIME type can be extracted."""
    if not content_type:
        return False
    return content_type.split(";")[0].strip().lower() == PDF_MIME_TYPE


def _validate_pdf_bytes(file_content: bytes) -> None:
    """Reject input that is empty, too large, or not a PDF.

    Raises:
        ExtractionError: If validation fails.
    """
    if not file_content:
        raise ExtractionError("Empty file provided")

    if len(file_content) > MAX_FILE_SIZE:
        size_mb = len(file_content) / (1024 * 1024)
        raise ExtractionError(f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)")

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise ExtractionError("Invalid PDF: file does not start with PDF header")


def _extract_metadata(reader: PdfReader) -> dict[str, str]:
    metadata: dict[str, str] = {}

    try:
        info = reader.metadata
        if info:
            for key, name in (("/Title", "title"), ("/Author", "author"), ("/Subject", "subject")):
                value = info.get(key)
                if value:
                    metadata[name] = str(value)
    except Exception as e:
        logger.warning(f"Failed to read PDF metadata: {e}")

    return metadata


def page_fragments(raw_text: str) -> list[str]:
    """Split one page's extracted text into its ordered text fragments.

    pypdf reports a page as lines of text; each non-blank line is a fragment.
    """
    return [line.strip() for line in raw_text.splitlines() if line.strip()]


def parse_pdf(file_content: bytes) -> PDFContent:
    """Parse a PDF file and extract its text content.

    Fragments within a page are joined with a single space and pages are
    joined with a newline. Nothing is returned unless every page was read.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        PDFContent with extracted text, page count, and metadata.

    Raises:
        ExtractionError: If the file is invalid, too large, empty, or corrupt,
            or if any page fails to extract.
    """
    _validate_pdf_bytes(file_content)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = len(reader.pages)
    except PdfReadError as e:
        raise ExtractionError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise ExtractionError(f"Failed to read PDF: {e}") from e

    if pages == 0:
        raise ExtractionError("PDF contains no pages")

    page_texts: list[str] = []
    for number, page in enumerate(reader.pages, start=1):
        try:
            raw_text = page.extract_text() or ""
        except Exception as e:
            raise ExtractionError(f"Failed to extract text from page {number}: {e}") from e
        page_texts.append(FRAGMENT_SEPARATOR.join(page_fragments(raw_text)))

    text = PAGE_SEPARATOR.join(page_texts)
    if not text.strip():
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    return PDFContent(text=text, pages=pages, metadata=_extract_metadata(reader))


def extract_text(file_content: bytes) -> str:
    """Return only the concatenated text of a PDF."""
    return parse_pdf(file_content).text
