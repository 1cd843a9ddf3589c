"""FastAPI dependency injection wiring."""

from __future__ import annotations

from functools import lru_cache

import httpx

from trophy_card.infrastructure.config import Settings, get_settings
from trophy_card.infrastructure.github_graphql_adapter import GitHubGraphQLAdapter
from trophy_card.services.render_trophy_card import RenderTrophyCardUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout_s))


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


@lru_cache(maxsize=1)
def _settings() -> Settings:
    return get_settings()


def get_use_case() -> RenderTrophyCardUseCase:
    """Build the use case with the GraphQL adapter injected."""
    settings = _settings()

    assert _http_client is not None, "startup() was not called"

    token = settings.github_token.get_secret_value() if settings.github_token else None
    fetcher = GitHubGraphQLAdapter(
        client=_http_client,
        token=token,
        url=settings.github_graphql_url,
        user_agent=settings.github_user_agent,
    )
    return RenderTrophyCardUseCase(stats_fetcher=fetcher)
