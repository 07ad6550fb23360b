"""Pydantic schemas for messaging endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from skillswap.schemas import ApiModel


class SendMessageRequest(ApiModel):
    from_id: str = Field(..., min_length=1)
    to_id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)


class MessageResponse(ApiModel):
    id: str
    from_id: str
    to_id: str
    text: str
    time: datetime
