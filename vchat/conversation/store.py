"""Append-only conversation log."""

import itertools
from collections.abc import Iterator

from vchat.models.schemas import Message, MessageRole


class ConversationStore:
    """Ordered log of conversation turns.

    The store assigns every message its id. Insertion order is the
    conversation order; there is no update or delete.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._ids = itertools.count(1)

    def append(self, role: MessageRole | str, text: str, *, is_error: bool = False) -> Message:
        """Record a new turn at the end of the log.

        Raises:
            ValueError: If role is not a known message role.
        """
        message = Message(
            id=next(self._ids),
            text=text,
            role=MessageRole(role),
            is_error=is_error,
        )
        self._messages.append(message)
        return message

    def snapshot(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.snapshot())
