"""Badge and leaderboard endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from skillswap.dependencies import get_badges, get_identity
from skillswap.gamification.badge_ledger import BadgeLedger
from skillswap.gamification.badge_service import award_badge, remove_badge
from skillswap.gamification.leaderboard import build_leaderboard
from skillswap.gamification.schemas import BadgeRemovalResponse, BadgeRequest, LeaderboardRowResponse
from skillswap.identity.store import IdentityStore
from skillswap.schemas import SuccessResponse

router = APIRouter(tags=["Gamification"])


@router.post("/badge", response_model=SuccessResponse)
async def post_badge(
    body: BadgeRequest,
    identity: IdentityStore = Depends(get_identity),  # noqa: B008
    ledger: BadgeLedger = Depends(get_badges),  # noqa: B008
) -> SuccessResponse:
    """Award a badge. Awarding one the user already holds is a silent no-op."""
    award_badge(identity, ledger, body.badge, username=body.username, user_id=body.user_id)
    return SuccessResponse()


@router.delete("/badge", response_model=BadgeRemovalResponse)
async def delete_badge(
    body: BadgeRequest,
    identity: IdentityStore = Depends(get_identity),  # noqa: B008
    ledger: BadgeLedger = Depends(get_badges),  # noqa: B008
) -> BadgeRemovalResponse:
    removed = remove_badge(identity, ledger, body.badge, username=body.username, user_id=body.user_id)
    return BadgeRemovalResponse(removed=removed)


@router.get("/leaderboard", response_model=list[LeaderboardRowResponse])
async def get_leaderboard(
    identity: IdentityStore = Depends(get_identity),  # noqa: B008
    ledger: BadgeLedger = Depends(get_badges),  # noqa: B008
) -> list[LeaderboardRowResponse]:
    """Every known username ranked by badge count, ties by username."""
    return [
        LeaderboardRowResponse(
            username=row.username,
            badges=row.badges,
            badges_list=row.badges_list,
            skills_offered=row.skills_offered,
            skills_wanted=row.skills_wanted,
        )
        for row in build_leaderboard(identity.all(), ledger.entries())
    ]
