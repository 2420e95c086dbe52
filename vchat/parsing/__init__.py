"""PDF parsing for document context.

Responsibilities:
    - Upload type check (PDF only)
    - PDF text extraction with pypdf, page order preserved
    - Metadata extraction (title, author, subject)

The extracted text is handed to the turn controller, which decides whether
to keep it.
"""

from vchat.parsing.pdf_parser import (
    ExtractionError,
    PDFContent,
    extract_text,
    is_supported_upload,
    parse_pdf,
)

__all__ = ["ExtractionError", "PDFContent", "extract_text", "is_supported_upload", "parse_pdf"]
