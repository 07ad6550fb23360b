"""Demo seed data — five users, a few badges, two thanks and one session.

Safe to run repeatedly: skill lists are reset to the demo values, badges are
de-duplicated by the ledger, thanks are only added to an empty feed, and the
demo session is only added when none exists between its two users.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from skillswap.dependencies import Stores

logger = logging.getLogger(__name__)

DEMO_USERS: list[dict] = [
    {"username": "demo", "teach": ["Coding", "Chess"], "learn": ["Guitar", "Cooking"]},
    {"username": "alex", "teach": ["Guitar", "Photography"], "learn": ["Coding", "Public Speaking"]},
    {"username": "taylor", "teach": ["Cooking", "Writing"], "learn": ["Photography", "Chess"]},
    {"username": "sam", "teach": ["Yoga", "Public Speaking"], "learn": ["Writing", "Coding"]},
    {"username": "jordan", "teach": ["Painting", "Dancing"], "learn": ["Yoga", "Photography"]},
]

DEMO_BADGES: dict[str, list[str]] = {
    "alex": ["Super Teacher", "Helper", "Mentor"],
    "taylor": ["Fast Learner", "Creative Chef"],
    "demo": ["Community Star"],
    "sam": ["Collaborator"],
    "jordan": ["Rising Talent"],
}

DEMO_THANKS: list[tuple[str, str, str]] = [
    ("demo", "alex", "Thanks for the awesome guitar session!"),
    ("taylor", "demo", "Loved the coding tips!"),
]


def seed_demo(stores: Stores) -> None:
    """Populate the stores with demo data (idempotent)."""
    for profile in DEMO_USERS:
        user = stores.identity.login(profile["username"])
        stores.identity.update_profile(user.id, profile["teach"], profile["learn"])

    awarded = 0
    for username, badges in DEMO_BADGES.items():
        for badge in badges:
            awarded += stores.badges.award(username, badge)

    if len(stores.thanks) == 0:
        for sender, recipient, message in DEMO_THANKS:
            stores.thanks.post(sender, recipient, message)

    demo = stores.identity.find_by_username("demo")
    alex = stores.identity.find_by_username("alex")
    if demo and alex and stores.sessions.between(demo.id, alex.id) is None:
        session = stores.sessions.propose(
            demo.id,
            alex.id,
            "Guitar",
            datetime.now(timezone.utc) + timedelta(hours=1),
        )
        stores.sessions.accept(session.id)

    logger.info("Demo data seeded: %d users, %d new badges", len(stores.identity), awarded)
