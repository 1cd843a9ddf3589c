"""Threshold-based rank lookup and the per-statistic cutoff tables."""

from __future__ import annotations

from trophy_card.domain.entities import RankTier
from trophy_card.domain.value_objects import RankThresholds

# ── Cutoff tables ───────────────────────────────────────────────────────────

STAR_THRESHOLDS = RankThresholds(c=1, b=20, a=50, s=100, ss=500, sss=2000)
COMMIT_THRESHOLDS = RankThresholds(c=1, b=100, a=500, s=1000, ss=5000, sss=10_000)
FOLLOWER_THRESHOLDS = RankThresholds(c=1, b=20, a=50, s=100, ss=500, sss=1000)


def rank(value: int, thresholds: RankThresholds) -> RankTier:
    """Return the highest tier whose cutoff *value* meets, or ``D`` if none."""
    for tier, cutoff in thresholds.descending():
        if value >= cutoff:
            return tier
    return RankTier.D
