"""Badge ledger — per-username badge lists with case-insensitive uniqueness."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

import structlog

logger = structlog.get_logger()


@dataclass
class BadgeEntry:
    """Badges held by one username, in award order."""

    username: str
    badges: list[str] = field(default_factory=list)

    def holds(self, badge: str) -> bool:
        folded = badge.casefold()
        return any(b.casefold() == folded for b in self.badges)


class BadgeLedger:
    """Username -> badges. Entries are created on first award and never dropped."""

    def __init__(self) -> None:
        self._entries: dict[str, BadgeEntry] = {}  # casefolded username -> entry
        self._lock = threading.Lock()

    def award(self, username: str, badge: str) -> bool:
        """Add a badge unless the user already holds it in any casing.

        Returns True if awarded, False if it was a duplicate.
        """
        key = username.casefold()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                entry = self._entries[key] = BadgeEntry(username=username)
            if entry.holds(badge):
                return False
            entry.badges.append(badge)

        logger.info("badge_awarded", username=username, badge=badge)
        return True

    def remove(self, username: str, badge: str) -> bool:
        """Remove a badge in any casing. Returns False if nothing was removed."""
        folded = badge.casefold()
        with self._lock:
            entry = self._entries.get(username.casefold())
            if entry is None:
                return False
            before = len(entry.badges)
            entry.badges = [b for b in entry.badges if b.casefold() != folded]
            removed = len(entry.badges) != before

        if removed:
            logger.info("badge_removed", username=username, badge=badge)
        return removed

    def badges_for(self, username: str) -> list[str]:
        entry = self._entries.get(username.casefold())
        return list(entry.badges) if entry else []

    def entries(self) -> list[BadgeEntry]:
        """Snapshot copies of every entry in creation order."""
        with self._lock:
            return [BadgeEntry(username=e.username, badges=list(e.badges)) for e in self._entries.values()]
