"""Direct messages between two users."""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

import structlog

from skillswap.errors import InvalidInput

logger = structlog.get_logger()


@dataclass
class Message:
    id: str
    from_id: str
    to_id: str
    text: str
    time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class MessageLog:
    """Append-only message list. Parties are not checked against the identity store."""

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._lock = threading.Lock()

    def send(self, from_id: str | None, to_id: str | None, text: str | None) -> Message:
        if not from_id or not to_id or not text:
            raise InvalidInput("fromId, toId and text are required")

        message = Message(id=str(uuid.uuid4()), from_id=from_id, to_id=to_id, text=text)
        with self._lock:
            self._messages.append(message)

        logger.debug("message_sent", message_id=message.id, from_id=from_id, to_id=to_id)
        return message

    def conversation(self, user_a: str, user_b: str) -> list[Message]:
        """Messages exchanged between two users in either direction, oldest first."""
        pair = {(user_a, user_b), (user_b, user_a)}
        with self._lock:
            return [m for m in self._messages if (m.from_id, m.to_id) in pair]
