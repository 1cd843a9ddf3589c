"""Map raw account counts to the ranked trophies shown on the card."""

from __future__ import annotations

from trophy_card.domain.entities import RawStats, Trophy
from trophy_card.services.rank_calculator import (
    COMMIT_THRESHOLDS,
    FOLLOWER_THRESHOLDS,
    STAR_THRESHOLDS,
    rank,
)


def build_trophies(stats: RawStats) -> list[Trophy]:
    """Return the Stars, Commits and Followers trophies, in that order."""
    return [
        Trophy(name="Stars", value=stats.total_stars, rank=rank(stats.total_stars, STAR_THRESHOLDS)),
        Trophy(
            name="Commits",
            value=stats.total_commits,
            rank=rank(stats.total_commits, COMMIT_THRESHOLDS),
        ),
        Trophy(
            name="Followers",
            value=stats.total_followers,
            rank=rank(stats.total_followers, FOLLOWER_THRESHOLDS),
        ),
    ]
