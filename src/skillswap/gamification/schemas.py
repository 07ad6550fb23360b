"""Pydantic schemas for badge and leaderboard endpoints."""

from __future__ import annotations

from skillswap.schemas import ApiModel


class BadgeRequest(ApiModel):
    """Award or remove a badge. Either ``username`` or ``userId`` identifies the owner."""

    username: str | None = None
    user_id: str | None = None
    badge: str | None = None


class BadgeRemovalResponse(ApiModel):
    success: bool = True
    removed: bool


class LeaderboardRowResponse(ApiModel):
    username: str
    badges: int
    badges_list: list[str]
    skills_offered: list[str]
    skills_wanted: list[str]
