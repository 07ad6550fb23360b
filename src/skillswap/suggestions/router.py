"""Skill suggestion endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from skillswap.schemas import ApiModel
from skillswap.suggestions.catalog import suggest

router = APIRouter(tags=["Suggestions"])


class SuggestionResponse(ApiModel):
    suggestion: str


@router.get("/suggest", response_model=SuggestionResponse)
async def get_suggestion() -> SuggestionResponse:
    return SuggestionResponse(suggestion=suggest())
