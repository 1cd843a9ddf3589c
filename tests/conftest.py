"""Shared fixtures: a scripted StatsFetcher and a wired FastAPI test client."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from trophy_card.domain.entities import RawStats
from trophy_card.interface.app import create_app
from trophy_card.interface.dependencies import get_use_case
from trophy_card.services.render_trophy_card import RenderTrophyCardUseCase


class FakeStatsFetcher:
    """Returns canned stats (or raises a canned error) and records calls."""

    def __init__(self, stats: RawStats | None = None, error: Exception | None = None) -> None:
        self.stats = stats or RawStats(total_stars=120, total_commits=640, total_followers=25)
        self.error = error
        self.calls: list[str] = []

    async def fetch_stats(self, username: str) -> RawStats:
        self.calls.append(username)
        if self.error is not None:
            raise self.error
        return self.stats


@pytest.fixture
def fake_fetcher() -> FakeStatsFetcher:
    return FakeStatsFetcher()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app, fake_fetcher):
    app.dependency_overrides[get_use_case] = lambda: RenderTrophyCardUseCase(fake_fetcher)
    yield TestClient(app)
    app.dependency_overrides.clear()
