"""Match lookup endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from skillswap.dependencies import get_identity
from skillswap.identity.schemas import UserResponse, user_response
from skillswap.identity.store import IdentityStore
from skillswap.matching.engine import find_matches

router = APIRouter(tags=["Matching"])


@router.get("/matches/{user_id}", response_model=list[UserResponse])
async def get_matches(
    user_id: str,
    identity: IdentityStore = Depends(get_identity),  # noqa: B008
) -> list[UserResponse]:
    """Users whose offered/wanted skills reciprocate with this user's."""
    user = identity.require(user_id)
    return [user_response(u) for u in find_matches(user, identity.all())]
