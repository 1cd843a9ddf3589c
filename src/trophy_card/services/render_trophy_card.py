"""Render-trophy-card use case — fetch, rank, render.

Depends only on the :class:`StatsFetcher` port and the pure service modules.
The interface layer injects the concrete adapter at runtime.
"""

from __future__ import annotations

import logging

from trophy_card.domain.ports.stats_fetcher import StatsFetcher
from trophy_card.domain.value_objects import StatRequest
from trophy_card.services.card_renderer import render_card
from trophy_card.services.trophies import build_trophies

logger = logging.getLogger(__name__)


class RenderTrophyCardUseCase:
    """Orchestrates username → stats → trophies → SVG.

    Parameters
    ----------
    stats_fetcher:
        Adapter that resolves aggregate counts for a GitHub account.
    """

    def __init__(self, stats_fetcher: StatsFetcher) -> None:
        self._fetcher = stats_fetcher

    async def execute(self, request: StatRequest) -> str:
        """Return the rendered SVG card for *request*.

        Any fetch failure propagates; no partial card is ever produced.
        """
        logger.info("Rendering trophy card for %s (theme=%s)", request.username, request.theme)
        stats = await self._fetcher.fetch_stats(request.username)
        trophies = build_trophies(stats)
        logger.debug(
            "Ranks for %s: %s",
            request.username,
            ", ".join(f"{t.name}={t.rank.value}" for t in trophies),
        )
        return render_card(trophies, request.theme)
