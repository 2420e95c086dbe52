"""PDF upload endpoint for document context.

Handles file upload, validation, and extraction into the session's
document context.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from vchat.conversation.controller import TurnController, get_turn_controller
from vchat.models.schemas import PDFUploadResponse, UploadStatus
from vchat.parsing.pdf_parser import MAX_FILE_SIZE, PDF_MIME_TYPE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])

# 10MB limit matches pdf_parser constant
MAX_UPLOAD_SIZE = MAX_FILE_SIZE


def _validate_file_extension(filename: str | None) -> str:
    """Validate that file has .pdf extension.

    Raises:
        HTTPException: 400 if the filename is missing or the extension is invalid.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    if not filename.lower().endswith(".pdf"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF files are accepted",
        )

    return filename


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > MAX_UPLOAD_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    return content


@router.post("/pdf", response_model=PDFUploadResponse)
async def upload_pdf(
    file: UploadFile,
    controller: TurnController = Depends(get_turn_controller),
) -> PDFUploadResponse:
    """Upload a PDF and make its text the context for later messages.

    Replaces any previously uploaded document and adds a file notice to the
    conversation. A failed extraction leaves the conversation untouched.

    Raises:
        400: Invalid file (not PDF, empty, corrupt).
        413: File exceeds 10MB limit.
    """
    filename = _validate_file_extension(file.filename)
    content = await _read_and_validate_size(file)

    result = await controller.upload(filename, content, file.content_type or PDF_MIME_TYPE)

    if result.status is UploadStatus.IGNORED:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF files are accepted",
        )
    if result.status is UploadStatus.FAILED:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.error or "Failed to read PDF",
        )

    return PDFUploadResponse(
        filename=filename,
        pages=result.pages,
        success=True,
    )
