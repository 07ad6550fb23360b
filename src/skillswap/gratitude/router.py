"""Wall of Thanks endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from skillswap.dependencies import get_thanks
from skillswap.gratitude.feed import GratitudeFeed
from skillswap.gratitude.schemas import PostThanksRequest, ThanksEntryResponse
from skillswap.schemas import SuccessResponse

router = APIRouter(tags=["Thanks"])


@router.post("/thanks", response_model=SuccessResponse)
async def post_thanks(
    body: PostThanksRequest,
    feed: GratitudeFeed = Depends(get_thanks),  # noqa: B008
) -> SuccessResponse:
    feed.post(body.sender, body.recipient, body.message)
    return SuccessResponse()


@router.get("/thanks", response_model=list[ThanksEntryResponse])
async def list_thanks(
    feed: GratitudeFeed = Depends(get_thanks),  # noqa: B008
) -> list[ThanksEntryResponse]:
    """The whole feed, oldest first. Clients sort or truncate for display."""
    return [
        ThanksEntryResponse(
            id=e.id,
            sender=e.sender,
            recipient=e.recipient,
            message=e.message,
            time=e.time,
        )
        for e in feed.entries()
    ]
