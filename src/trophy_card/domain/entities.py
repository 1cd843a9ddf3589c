"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RankTier(str, Enum):
    """Rank awarded to a statistic, from the lowest (D) to the highest (SSS)."""

    D = "D"
    C = "C"
    B = "B"
    A = "A"
    S = "S"
    SS = "SS"
    SSS = "SSS"

    @property
    def order(self) -> int:
        return _TIER_ORDER.index(self)


_TIER_ORDER: list[RankTier] = list(RankTier)


@dataclass(frozen=True, slots=True)
class RawStats:
    """Aggregate counts for one GitHub account, as reported by the API."""

    total_stars: int
    total_commits: int
    total_followers: int
    total_pull_requests: int = 0
    total_issues: int = 0
    repository_count: int = 0  # owned non-fork repos; stars only cover the first 100
    created_at: str | None = None

    def __post_init__(self) -> None:
        counts = {
            "total_stars": self.total_stars,
            "total_commits": self.total_commits,
            "total_followers": self.total_followers,
            "total_pull_requests": self.total_pull_requests,
            "total_issues": self.total_issues,
            "repository_count": self.repository_count,
        }
        negative = {name: value for name, value in counts.items() if value < 0}
        if negative:
            raise ValueError(f"Counts must be non-negative, got {negative}.")


@dataclass(frozen=True, slots=True)
class Trophy:
    """A single ranked statistic, rendered as one tile of the card."""

    name: str
    value: int
    rank: RankTier
