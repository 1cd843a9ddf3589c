"""Value objects — self-validating domain primitives."""

from __future__ import annotations

from dataclasses import dataclass

from trophy_card.domain.entities import RankTier
from trophy_card.domain.exceptions import MissingUsernameError


@dataclass(frozen=True, slots=True)
class StatRequest:
    """Validated inbound request for a trophy card.

    Built from the raw query parameters; a blank or missing username is
    rejected before anything touches the network.
    """

    username: str
    theme: str | None = None

    @classmethod
    def from_query(cls, username: str | None, theme: str | None = None) -> StatRequest:
        """Parse and validate raw query parameters."""
        login = (username or "").strip()
        if not login:
            raise MissingUsernameError("Request is missing the 'username' query parameter.")
        return cls(username=login, theme=theme)


@dataclass(frozen=True, slots=True)
class RankThresholds:
    """Six ascending cutoffs for one statistic (inclusive lower bounds)."""

    c: int
    b: int
    a: int
    s: int
    ss: int
    sss: int

    def __post_init__(self) -> None:
        cutoffs = [self.c, self.b, self.a, self.s, self.ss, self.sss]
        if cutoffs[0] < 0:
            raise ValueError(f"Rank cutoffs must be non-negative, got {cutoffs}.")
        if any(low > high for low, high in zip(cutoffs, cutoffs[1:])):
            raise ValueError(f"Rank cutoffs must be ascending, got {cutoffs}.")

    def descending(self) -> list[tuple[RankTier, int]]:
        """Return ``(tier, cutoff)`` pairs from SSS down to C."""
        return [
            (RankTier.SSS, self.sss),
            (RankTier.SS, self.ss),
            (RankTier.S, self.s),
            (RankTier.A, self.a),
            (RankTier.B, self.b),
            (RankTier.C, self.c),
        ]


@dataclass(frozen=True, slots=True)
class Theme:
    """Colour palette applied to every tile of a card."""

    background: str
    text: str
    rank: str
    border: str
