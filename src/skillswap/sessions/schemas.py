"""Pydantic schemas for session endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import Field, field_validator

from skillswap.schemas import ApiModel


class ProposeSessionRequest(ApiModel):
    from_id: str = Field(..., min_length=1)
    to_id: str = Field(..., min_length=1)
    skill: str = Field(..., min_length=1)
    time: datetime | None = None  # ISO string or epoch seconds/milliseconds

    @field_validator("time", mode="before")
    @classmethod
    def blank_time_means_now(cls, v: Any) -> Any:  # noqa: ANN401
        """An empty or whitespace-only time is treated as omitted."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class AcceptSessionRequest(ApiModel):
    session_id: str | None = None


class SessionResponse(ApiModel):
    id: str
    from_id: str
    to_id: str
    skill: str
    time: datetime
    status: Literal["pending", "accepted"]


class SessionWithNamesResponse(SessionResponse):
    from_name: str
    to_name: str
