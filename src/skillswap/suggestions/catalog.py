"""Fixed skill catalog used for suggestions."""

from __future__ import annotations

import random

SKILL_CATALOG: tuple[str, ...] = (
    "Guitar",
    "Cooking",
    "Coding",
    "Painting",
    "Yoga",
    "Photography",
    "Public Speaking",
    "Writing",
    "Chess",
    "Dancing",
)


def suggest(rng: random.Random | None = None) -> str:
    """Uniform random pick from the catalog."""
    return (rng or random).choice(SKILL_CATALOG)
