"""Pydantic schemas for the Wall of Thanks."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from skillswap.schemas import ApiModel


class PostThanksRequest(ApiModel):
    sender: str = Field(..., alias="from", min_length=1)
    recipient: str = Field(..., alias="to", min_length=1)
    message: str = Field(..., min_length=1)


class ThanksEntryResponse(ApiModel):
    id: str
    sender: str = Field(..., alias="from")
    recipient: str = Field(..., alias="to")
    message: str
    time: datetime
