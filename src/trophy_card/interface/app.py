"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from trophy_card.interface.dependencies import shutdown, startup
from trophy_card.interface.error_handlers import register_error_handlers
from trophy_card.interface.routes import router
from trophy_card.services.themes import DEFAULT_THEME, THEMES


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the shared GitHub HTTP client for the app's lifetime."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="GitHub Profile Trophies",
        version="1.0.0",
        description=(
            "`GET /api?username=<login>&theme=<name>` returns an `image/svg+xml` "
            "card ranking the account's stars, commits and followers from D to SSS. "
            f"Themes: {', '.join(sorted(THEMES))} (unknown names use `{DEFAULT_THEME}`). "
            "A missing username answers 400; an unknown user or GitHub API "
            "failure answers 404."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Health check (liveness probe, lists the available themes) ──────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, object]:
        return {"status": "ok", "themes": sorted(THEMES)}

    return app
