"""Badge award/removal with owner resolution against the identity store."""

from __future__ import annotations

from skillswap.errors import InvalidInput
from skillswap.gamification.badge_ledger import BadgeLedger
from skillswap.identity.store import IdentityStore


def resolve_badge_owner(identity: IdentityStore, username: str | None, user_id: str | None) -> str:
    """Pick the ledger key: an explicit username wins, else the username of ``user_id``.

    Raises:
        InvalidInput: If neither resolves to a username.
    """
    key = username or identity.username_for(user_id)
    if not key:
        raise InvalidInput("username (or userId) and badge are required")
    return key


def award_badge(
    identity: IdentityStore,
    ledger: BadgeLedger,
    badge: str | None,
    username: str | None = None,
    user_id: str | None = None,
) -> bool:
    """Award a badge. Returns False when the user already had it."""
    owner = resolve_badge_owner(identity, username, user_id)
    if not badge:
        raise InvalidInput("username (or userId) and badge are required")
    return ledger.award(owner, badge)


def remove_badge(
    identity: IdentityStore,
    ledger: BadgeLedger,
    badge: str | None,
    username: str | None = None,
    user_id: str | None = None,
) -> bool:
    """Remove a badge. Missing users or badges are not an error."""
    owner = resolve_badge_owner(identity, username, user_id)
    if not badge:
        raise InvalidInput("username (or userId) and badge are required")
    return ledger.remove(owner, badge)
