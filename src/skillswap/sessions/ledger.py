"""Session ledger — proposed and accepted teach/learn sessions.

State progression: pending -> accepted
Accepting an already accepted session is a harmless no-op; nothing reverts
and nothing is deleted.
"""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

import structlog

from skillswap.errors import InvalidInput, NotFound

logger = structlog.get_logger()

PENDING = "pending"
ACCEPTED = "accepted"

VALID_TRANSITIONS: dict[str, list[str]] = {
    PENDING: [ACCEPTED],
    ACCEPTED: [],
}


def validate_transition(current_status: str, target_status: str) -> None:
    """Validate a state transition. Raises ValueError if invalid."""
    valid = VALID_TRANSITIONS.get(current_status, [])
    if target_status not in valid:
        raise ValueError(
            f"Invalid transition: {current_status} -> {target_status}. "
            f"Valid transitions: {valid}"
        )


def _as_utc(value: datetime) -> datetime:
    """Naive client times are taken to be UTC."""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


@dataclass
class Session:
    id: str
    from_id: str
    to_id: str
    skill: str
    time: datetime
    status: str = PENDING

    def involves(self, user_id: str) -> bool:
        return user_id in (self.from_id, self.to_id)


class SessionLedger:
    """Append-only list of sessions in proposal order."""

    def __init__(self) -> None:
        self._sessions: list[Session] = []
        self._by_id: dict[str, Session] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def propose(
        self,
        from_id: str | None,
        to_id: str | None,
        skill: str | None,
        time: datetime | None = None,
    ) -> Session:
        """Record a new pending session.

        Raises:
            InvalidInput: If a party or the skill is missing, or both parties are the same user.
        """
        if not from_id or not to_id or not skill:
            raise InvalidInput("fromId, toId and skill are required")
        if from_id == to_id:
            raise InvalidInput("Cannot propose a session to yourself")

        session = Session(
            id=str(uuid.uuid4()),
            from_id=from_id,
            to_id=to_id,
            skill=skill,
            time=_as_utc(time) if time else datetime.now(timezone.utc),
        )
        with self._lock:
            self._sessions.append(session)
            self._by_id[session.id] = session

        logger.info("session_proposed", session_id=session.id, from_id=from_id, to_id=to_id, skill=skill)
        return session

    def accept(self, session_id: str | None) -> Session:
        """Move a session to accepted. Re-accepting returns it unchanged.

        Raises:
            NotFound: If the session id is missing or unknown.
        """
        with self._lock:
            session = self._by_id.get(session_id) if session_id else None
            if session is None:
                raise NotFound("Session not found")
            if session.status == ACCEPTED:
                return session
            validate_transition(session.status, ACCEPTED)
            session.status = ACCEPTED

        logger.info("session_accepted", session_id=session.id)
        return session

    def get(self, session_id: str) -> Session | None:
        return self._by_id.get(session_id)

    def for_user(self, user_id: str) -> list[Session]:
        """Sessions where the user is either party, oldest first."""
        with self._lock:
            return [s for s in self._sessions if s.involves(user_id)]

    def between(self, user_a: str, user_b: str) -> Session | None:
        """First session between two users, in either direction."""
        with self._lock:
            for s in self._sessions:
                if s.involves(user_a) and s.involves(user_b):
                    return s
        return None
