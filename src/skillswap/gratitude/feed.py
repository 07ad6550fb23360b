"""Wall of Thanks — a public, append-only gratitude feed."""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

import structlog

from skillswap.errors import InvalidInput

logger = structlog.get_logger()


@dataclass
class ThanksEntry:
    id: str
    sender: str
    recipient: str
    message: str
    time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class GratitudeFeed:
    """Thanks entries in posting order.

    Sender and recipient are free-text usernames; thanks can go to anyone,
    matched or not.
    """

    def __init__(self) -> None:
        self._entries: list[ThanksEntry] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def post(self, sender: str | None, recipient: str | None, message: str | None) -> ThanksEntry:
        if not sender or not recipient or not message:
            raise InvalidInput("from, to and message are required")

        entry = ThanksEntry(id=str(uuid.uuid4()), sender=sender, recipient=recipient, message=message)
        with self._lock:
            self._entries.append(entry)

        logger.info("thanks_posted", entry_id=entry.id, sender=sender, recipient=recipient)
        return entry

    def entries(self) -> list[ThanksEntry]:
        """Every entry, oldest first."""
        with self._lock:
            return list(self._entries)
