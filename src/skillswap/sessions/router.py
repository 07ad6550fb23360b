"""Session proposal, acceptance and listing endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from skillswap.dependencies import get_identity, get_sessions
from skillswap.identity.store import IdentityStore
from skillswap.sessions.ledger import Session, SessionLedger
from skillswap.sessions.schemas import (
    AcceptSessionRequest,
    ProposeSessionRequest,
    SessionResponse,
    SessionWithNamesResponse,
)

router = APIRouter(tags=["Sessions"])

UNKNOWN_NAME = "Unknown"


def _session_response(session: Session) -> SessionResponse:
    return SessionResponse(
        id=session.id,
        from_id=session.from_id,
        to_id=session.to_id,
        skill=session.skill,
        time=session.time,
        status=session.status,
    )


@router.post("/session", response_model=SessionResponse)
async def propose_session(
    body: ProposeSessionRequest,
    ledger: SessionLedger = Depends(get_sessions),  # noqa: B008
) -> SessionResponse:
    """Propose a pending session from one user to another."""
    session = ledger.propose(body.from_id, body.to_id, body.skill, body.time)
    return _session_response(session)


@router.post("/session/accept", response_model=SessionResponse)
async def accept_session(
    body: AcceptSessionRequest,
    ledger: SessionLedger = Depends(get_sessions),  # noqa: B008
) -> SessionResponse:
    """Accept a session. Accepting twice is a no-op."""
    return _session_response(ledger.accept(body.session_id))


@router.get("/sessions/{user_id}", response_model=list[SessionWithNamesResponse])
async def list_sessions(
    user_id: str,
    identity: IdentityStore = Depends(get_identity),  # noqa: B008
    ledger: SessionLedger = Depends(get_sessions),  # noqa: B008
) -> list[SessionWithNamesResponse]:
    """Sessions the user is part of, with both parties' current usernames."""
    identity.require(user_id)
    return [
        SessionWithNamesResponse(
            **_session_response(s).model_dump(),
            from_name=identity.username_for(s.from_id) or UNKNOWN_NAME,
            to_name=identity.username_for(s.to_id) or UNKNOWN_NAME,
        )
        for s in ledger.for_user(user_id)
    ]
