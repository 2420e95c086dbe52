"""Chat endpoints: send a message and read the conversation."""

import logging

from fastapi import APIRouter, Depends

from vchat.conversation.controller import TurnController, get_turn_controller
from vchat.models.schemas import ChatRequest, ChatResponse, ConversationResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def send_message(
    request: ChatRequest,
    controller: TurnController = Depends(get_turn_controller),
) -> ChatResponse:
    """Send one message and wait for the assistant's reply.

    Blank messages, and messages sent while a reply is pending, are not
    dispatched.
    """
    reply = await controller.send(request.message)
    return ChatResponse(
        dispatched=reply is not None,
        state=controller.state,
        reply=reply,
    )


@router.get("/history", response_model=ConversationResponse)
async def get_history(
    controller: TurnController = Depends(get_turn_controller),
) -> ConversationResponse:
    """Return the conversation so far, oldest turn first."""
    return ConversationResponse(
        session_id=controller.session.session_id,
        state=controller.state,
        document=controller.document.filename,
        messages=list(controller.snapshot()),
    )
