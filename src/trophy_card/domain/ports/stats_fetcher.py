"""Port: stats fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from trophy_card.domain.entities import RawStats


class StatsFetcher(Protocol):
    """Abstract contract for fetching aggregate GitHub statistics."""

    async def fetch_stats(self, username: str) -> RawStats:
        """Return the counts for *username* or raise ``UpstreamError``."""
        ...
