"""Reciprocal skill matching.

User B matches user A when B offers something A wants *and* B wants something
A offers. The relation is symmetric by construction but evaluated fresh on
every query; there is no cached index. Skill names compare exactly.
"""

from __future__ import annotations

from collections.abc import Iterable

from skillswap.identity.store import User


def _overlaps(a: Iterable[str], b: Iterable[str]) -> bool:
    wanted = set(b)
    return any(skill in wanted for skill in a)


def is_match(user: User, other: User) -> bool:
    """True if ``other`` and ``user`` are distinct and reciprocate."""
    return (
        other.id != user.id
        and _overlaps(other.skills_offered, user.skills_wanted)
        and _overlaps(other.skills_wanted, user.skills_offered)
    )


def find_matches(user: User, users: Iterable[User]) -> list[User]:
    """All users reciprocating with ``user``, in store insertion order."""
    return [other for other in users if is_match(user, other)]
