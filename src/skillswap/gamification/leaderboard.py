"""Leaderboard projection over the identity store and the badge ledger.

Recomputed on every read so it always reflects the latest award, removal or
profile change. Every known username appears exactly once: registered users
with zero badges and badge holders who never logged in alike.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from skillswap.gamification.badge_ledger import BadgeEntry
from skillswap.identity.store import User


@dataclass
class LeaderboardRow:
    username: str
    badges_list: list[str] = field(default_factory=list)
    skills_offered: list[str] = field(default_factory=list)
    skills_wanted: list[str] = field(default_factory=list)

    @property
    def badges(self) -> int:
        return len(self.badges_list)


def sort_key(row: LeaderboardRow) -> tuple[int, str, str]:
    """Most badges first, then username ascending."""
    return (-row.badges, row.username.casefold(), row.username)


def build_leaderboard(users: Iterable[User], entries: Iterable[BadgeEntry]) -> list[LeaderboardRow]:
    rows: dict[str, LeaderboardRow] = {}

    for entry in entries:
        rows[entry.username.casefold()] = LeaderboardRow(
            username=entry.username,
            badges_list=list(entry.badges),
        )

    for user in users:
        key = user.username.casefold()
        row = rows.setdefault(key, LeaderboardRow(username=user.username))
        row.username = user.username
        row.skills_offered = list(user.skills_offered)
        row.skills_wanted = list(user.skills_wanted)

    return sorted(rows.values(), key=sort_key)
