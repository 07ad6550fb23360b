"""Identity store — users keyed by case-insensitive username.

Each user also owns its profile: the skills it offers and the skills it wants.
"""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from typing import Any

import structlog

from skillswap.errors import InvalidInput, NotFound

logger = structlog.get_logger()


@dataclass
class User:
    """A registered user and its skill profile."""

    id: str
    username: str
    skills_offered: list[str] = field(default_factory=list)
    skills_wanted: list[str] = field(default_factory=list)


def coerce_skills(value: Any) -> list[str]:  # noqa: ANN401
    """Anything that is not a list becomes an empty list; non-string items are dropped."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


class IdentityStore:
    """In-memory user records in insertion order."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}  # id -> user
        self._by_username: dict[str, str] = {}  # casefolded username -> id
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._users)

    def login(self, username: Any) -> User:  # noqa: ANN401
        """Return the user claiming ``username``, creating it on first use."""
        if not isinstance(username, str) or not username:
            raise InvalidInput("Username required")

        key = username.casefold()
        with self._lock:
            user_id = self._by_username.get(key)
            if user_id is not None:
                return self._users[user_id]

            user = User(id=str(uuid.uuid4()), username=username)
            self._users[user.id] = user
            self._by_username[key] = user.id

        logger.info("user_created", user_id=user.id, username=username)
        return user

    def update_profile(
        self,
        user_id: str | None,
        skills_offered: Any = None,  # noqa: ANN401
        skills_wanted: Any = None,  # noqa: ANN401
    ) -> User:
        """Replace both skill lists of a user.

        Raises:
            NotFound: If ``user_id`` is missing or unknown.
        """
        with self._lock:
            user = self._users.get(user_id) if user_id else None
            if user is None:
                raise NotFound("User not found")
            user.skills_offered = coerce_skills(skills_offered)
            user.skills_wanted = coerce_skills(skills_wanted)

        logger.info(
            "profile_updated",
            user_id=user.id,
            offered=len(user.skills_offered),
            wanted=len(user.skills_wanted),
        )
        return user

    def get(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def require(self, user_id: str) -> User:
        """Fetch a user or raise NotFound."""
        user = self._users.get(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def find_by_username(self, username: str) -> User | None:
        user_id = self._by_username.get(username.casefold())
        return self._users[user_id] if user_id is not None else None

    def username_for(self, user_id: str | None) -> str | None:
        """Current username for an id, or None if the id is unknown."""
        user = self._users.get(user_id) if user_id else None
        return user.username if user else None

    def all(self) -> list[User]:
        """Snapshot of every user in insertion order."""
        with self._lock:
            return list(self._users.values())
