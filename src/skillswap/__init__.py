"""SkillSwap API — reciprocal skill matching service."""
