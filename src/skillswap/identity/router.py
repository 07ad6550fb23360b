"""Login and profile endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from skillswap.dependencies import get_identity
from skillswap.identity.schemas import LoginRequest, ProfileUpdateRequest, UserResponse, user_response
from skillswap.identity.store import IdentityStore

router = APIRouter(tags=["Identity"])


@router.post("/auth", response_model=UserResponse)
async def login(
    body: LoginRequest,
    identity: IdentityStore = Depends(get_identity),  # noqa: B008
) -> UserResponse:
    """Return the user for a username, creating it on first login."""
    return user_response(identity.login(body.username))


@router.post("/profile", response_model=UserResponse)
async def update_profile(
    body: ProfileUpdateRequest,
    identity: IdentityStore = Depends(get_identity),  # noqa: B008
) -> UserResponse:
    """Replace the offered and wanted skill lists."""
    user = identity.update_profile(body.id, body.skills_offered, body.skills_wanted)
    return user_response(user)
