"""Application state container and the FastAPI dependencies that expose it."""

from __future__ import annotations

from dataclasses import dataclass, field

from fastapi import Request

from skillswap.gamification.badge_ledger import BadgeLedger
from skillswap.gratitude.feed import GratitudeFeed
from skillswap.identity.store import IdentityStore
from skillswap.messaging.log import MessageLog
from skillswap.sessions.ledger import SessionLedger


@dataclass
class Stores:
    """Every in-memory store owned by one application instance."""

    identity: IdentityStore = field(default_factory=IdentityStore)
    sessions: SessionLedger = field(default_factory=SessionLedger)
    messages: MessageLog = field(default_factory=MessageLog)
    thanks: GratitudeFeed = field(default_factory=GratitudeFeed)
    badges: BadgeLedger = field(default_factory=BadgeLedger)


def get_stores(request: Request) -> Stores:
    """Stores attached to the running app by ``create_app``."""
    return request.app.state.stores


def get_identity(request: Request) -> IdentityStore:
    return get_stores(request).identity


def get_sessions(request: Request) -> SessionLedger:
    return get_stores(request).sessions


def get_messages(request: Request) -> MessageLog:
    return get_stores(request).messages


def get_thanks(request: Request) -> GratitudeFeed:
    return get_stores(request).thanks


def get_badges(request: Request) -> BadgeLedger:
    return get_stores(request).badges
