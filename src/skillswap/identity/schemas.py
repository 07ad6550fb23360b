"""Request/response schemas for login and profile endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import Field, StrictStr, field_validator

from skillswap.identity.store import User, coerce_skills
from skillswap.schemas import ApiModel


class LoginRequest(ApiModel):
    """Claim a username. No password — trust on first use."""

    username: StrictStr = Field(..., min_length=1)


class ProfileUpdateRequest(ApiModel):
    """Replace both skill lists. Non-list values are treated as empty lists."""

    id: str | None = None
    skills_offered: list[str] = []
    skills_wanted: list[str] = []

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> str | None:  # noqa: ANN401
        """Non-string ids cannot match a user; keep them so the lookup reports 404."""
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("skills_offered", "skills_wanted", mode="before")
    @classmethod
    def coerce_to_list(cls, v: Any) -> list[str]:  # noqa: ANN401
        return coerce_skills(v)


class UserResponse(ApiModel):
    id: str
    username: str
    skills_offered: list[str]
    skills_wanted: list[str]


def user_response(user: User) -> UserResponse:
    """Build a UserResponse from a User record."""
    return UserResponse(
        id=user.id,
        username=user.username,
        skills_offered=list(user.skills_offered),
        skills_wanted=list(user.skills_wanted),
    )
