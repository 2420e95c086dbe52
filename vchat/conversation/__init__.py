"""Conversation state and turn orchestration.

Responsibilities:
    - Append-only message log
    - Prompt composition from user input and document context
    - Idle / awaiting-response state machine for one session
    - Document upload handling (latest upload wins)
"""

from vchat.conversation.composer import PROMPT_SEPARATOR, compose_prompt
from vchat.conversation.controller import (
    ERROR_NOTICE_TEXT,
    ChatSession,
    TurnController,
    get_turn_controller,
)
from vchat.conversation.store import ConversationStore

__all__ = [
    "ERROR_NOTICE_TEXT",
    "PROMPT_SEPARATOR",
    "ChatSession",
    "ConversationStore",
    "TurnController",
    "compose_prompt",
    "get_turn_controller",
]
