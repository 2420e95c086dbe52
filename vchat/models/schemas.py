from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MessageRole(str, Enum):
    """Who a turn in the conversation belongs to."""

    USER = "user"
    ASSISTANT = "assistant"
    FILE_NOTICE = "file"


class InteractionState(str, Enum):
    """Turn-taking state of a chat session."""

    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"


class GenerationOutcome(str, Enum):
    """How a generation request ended."""

    SUCCESS = "success"
    FALLBACK = "fallback"
    ERROR = "error"


class UploadStatus(str, Enum):
    """What happened to an uploaded file."""

    EXTRACTED = "extracted"
    FAILED = "failed"
    IGNORED = "ignored"


class Message(BaseModel):
    """One turn in the conversation.

    Attributes:
        id: Store-assigned identifier, strictly increasing in append order.
        text: Display text of the turn.
        role: The speaker (user, assistant, or file notice).
        is_error: True for the assistant turn that reports a failed request.
        created_at: When the turn was recorded.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)
    text: str
    role: MessageRole
    is_error: bool = False
    created_at: datetime = Field(default_factory=datetime.now)


class DocumentContext(BaseModel):
    """Text of the most recently uploaded document.

    Attributes:
        text: Extracted text of all pages, empty when nothing was uploaded.
        filename: Name of the uploaded file.
        pages: Page count of the uploaded file.
    """

    model_config = ConfigDict(frozen=True)

    text: str = ""
    filename: str | None = None
    pages: int = Field(default=0, ge=0)


class UploadResult(BaseModel):
    """Result of handing a file to the turn controller."""

    filename: str
    status: UploadStatus
    pages: int = 0
    error: str | None = None
    notice: Message | None = None


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        message: User's question or prompt. Blank input is accepted and ignored.
    """

    message: str

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ChatResponse(BaseModel):
    """Response from the chat endpoint.

    Attributes:
        dispatched: Whether the message started a new turn.
        state: Session state after the call.
        reply: The assistant turn, when one was produced.
    """

    dispatched: bool
    state: InteractionState
    reply: Message | None = None


class ConversationResponse(BaseModel):
    """Current conversation for a session."""

    session_id: str
    state: InteractionState
    document: str | None = None
    messages: list[Message]


class PDFUploadResponse(BaseModel):
    """Response after PDF upload processing.

    Attributes:
        filename: Name of the uploaded file.
        pages: Number of pages in the document.
        success: Whether the upload was successful.
        error: Error message if upload failed.
    """

    filename: str
    pages: int
    success: bool
    error: str | None = None
