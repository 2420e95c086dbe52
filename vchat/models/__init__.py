"""Pydantic models shared by the controller, the API and the UI.

Models:
    - Message: One turn in the conversation
    - DocumentContext: Text kept from the latest uploaded PDF
    - UploadResult: Outcome of an upload handed to the controller
    - ChatRequest / ChatResponse: Chat endpoint payloads
    - ConversationResponse: Conversation history payload
    - PDFUploadResponse: Upload endpoint payload
"""

from vchat.models.schemas import (
    ChatRequest,
    ChatResponse,
    ConversationResponse,
    DocumentContext,
    GenerationOutcome,
    InteractionState,
    Message,
    MessageRole,
    PDFUploadResponse,
    UploadResult,
    UploadStatus,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ConversationResponse",
    "DocumentContext",
    "GenerationOutcome",
    "InteractionState",
    "Message",
    "MessageRole",
    "PDFUploadResponse",
    "UploadResult",
    "UploadStatus",
]
