"""Turn orchestration for the chat session.

The controller is the only writer of session state. It runs one interaction
cycle at a time:

1. A non-blank send records the user turn and moves the session to
   ``awaiting_response``. Blank input, or a send while a reply is pending,
   is ignored.
2. The prompt is composed from the input and the document text held at that
   moment, then sent to the generation client.
3. The reply (or the fallback text) is recorded as an assistant turn; a
   failed request records the error notice instead. The session returns to
   ``idle`` either way.

Uploads are not gated by the turn state. A successful extraction replaces
the document context immediately, so a request already in flight keeps the
prompt it was composed with and the next send uses the new text.
"""

import asyncio
import logging
import uuid
from collections.abc import Callable

from vchat.conversation.composer import compose_prompt
from vchat.conversation.store import ConversationStore
from vchat.generation.client import GenerationClient, GenerationError, GenerationResult
from vchat.models.schemas import (
    DocumentContext,
    GenerationOutcome,
    InteractionState,
    Message,
    MessageRole,
    UploadResult,
    UploadStatus,
)
from vchat.parsing.pdf_parser import ExtractionError, PDFContent, is_supported_upload, parse_pdf

logger = logging.getLogger(__name__)

ERROR_NOTICE_TEXT = "❌ Error while calling the Gemini API."
FILE_NOTICE_TEMPLATE = "📄 Uploaded: {filename}"

Listener = Callable[[], None]


class ChatSession:
    """State of one conversation: history, document context, turn state."""

    def __init__(self) -> None:
        self.session_id: str = str(uuid.uuid4())
        self.store = ConversationStore()
        self.document = DocumentContext()
        self.state = InteractionState.IDLE


class TurnController:
    """Runs send and upload actions against a ChatSession."""

    def __init__(
        self,
        client: GenerationClient | None = None,
        session: ChatSession | None = None,
        extractor: Callable[[bytes], PDFContent] = parse_pdf,
    ) -> None:
        """Initialize the controller.

        Args:
            client: Generation client. Built from the environment if not provided.
            session: Session to drive. A fresh one is created if not provided.
            extractor: Turns PDF bytes into PDFContent, raising ExtractionError.
        """
        self._client = client or GenerationClient()
        self._session = session or ChatSession()
        self._extractor = extractor
        self._listeners: list[Listener] = []

    @property
    def session(self) -> ChatSession:
        return self._session

    @property
    def state(self) -> InteractionState:
        return self._session.state

    @property
    def busy(self) -> bool:
        return self._session.state is InteractionState.AWAITING_RESPONSE

    @property
    def document(self) -> DocumentContext:
        return self._session.document

    def snapshot(self) -> tuple[Message, ...]:
        return self._session.store.snapshot()

    def add_listener(self, listener: Listener) -> None:
        """Register a callback run after every change to the session."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception as e:
                logger.warning(f"Session listener failed: {e}")

    def _set_state(self, state: InteractionState) -> None:
        self._session.state = state
        self._notify()

    async def send(self, text: str) -> Message | None:
        """Run one interaction cycle for the given user input.

        Args:
            text: Raw user input.

        Returns:
            The assistant turn that was recorded, or None if the input was
            blank or a reply is still pending.
        """
        user_input = text.strip()
        if not user_input:
            logger.debug("Ignoring blank message")
            return None
        if self.busy:
            logger.info("Ignoring message while a reply is pending")
            return None

        store = self._session.store
        store.append(MessageRole.USER, user_input)
        self._set_state(InteractionState.AWAITING_RESPONSE)

        prompt = compose_prompt(user_input, self._session.document.text)
        logger.info(f"Dispatching turn with prompt of {len(prompt)} characters")

        try:
            result = await self._generate(prompt)
            if result.outcome is GenerationOutcome.ERROR:
                reply = store.append(MessageRole.ASSISTANT, ERROR_NOTICE_TEXT, is_error=True)
            else:
                reply = store.append(MessageRole.ASSISTANT, result.text)
        finally:
            self._set_state(InteractionState.IDLE)

        return reply

    async def _generate(self, prompt: str) -> GenerationResult:
        try:
            return await self._client.generate(prompt)
        except Exception as e:
            logger.exception("Unexpected failure while generating a reply")
            error = GenerationError(str(e))
            error.__cause__ = e
            return GenerationResult.failed(error)

    async def upload(
        self,
        filename: str,
        data: bytes,
        content_type: str | None = "application/pdf",
    ) -> UploadResult:
        """Extract an uploaded document and make it the current context.

        Unsupported file types are ignored. A failed extraction leaves the
        document context and the conversation unchanged.

        Args:
            filename: Original file name, shown in the file notice.
            data: Raw file bytes.
            content_type: MIME type reported for the file.

        Returns:
            UploadResult describing what happened.
        """
        if not is_supported_upload(content_type):
            logger.info(f"Ignoring upload of {filename}: unsupported type {content_type!r}")
            return UploadResult(filename=filename, status=UploadStatus.IGNORED)

        try:
            content = await asyncio.to_thread(self._extractor, data)
        except ExtractionError as e:
            logger.warning(f"PDF extraction failed for {filename}: {e}")
            return UploadResult(filename=filename, status=UploadStatus.FAILED, error=str(e))

        self._session.document = DocumentContext(
            text=content.text,
            filename=filename,
            pages=content.pages,
        )
        notice = self._session.store.append(
            MessageRole.FILE_NOTICE,
            FILE_NOTICE_TEMPLATE.format(filename=filename),
        )
        logger.info(f"Loaded {filename} ({content.pages} pages) as document context")
        self._notify()

        return UploadResult(
            filename=filename,
            status=UploadStatus.EXTRACTED,
            pages=content.pages,
            notice=notice,
        )


# Module-level singleton instance
_turn_controller: TurnController | None = None


def get_turn_controller() -> TurnController:
    """Get or create the process-wide turn controller.

    The API and the UI share this instance, and with it one conversation.

    Returns:
        The TurnController instance.
    """
    global _turn_controller
    if _turn_controller is None:
        _turn_controller = TurnController()
    return _turn_controller
