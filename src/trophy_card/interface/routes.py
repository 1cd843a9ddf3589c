"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from trophy_card.domain.value_objects import StatRequest
from trophy_card.interface.dependencies import get_use_case
from trophy_card.services.render_trophy_card import RenderTrophyCardUseCase

router = APIRouter()

SVG_MEDIA_TYPE = "image/svg+xml"
CACHE_CONTROL = "public, max-age=1800"


@router.get(
    "/api",
    response_class=Response,
    responses={
        200: {"content": {SVG_MEDIA_TYPE: {}}, "description": "Rendered trophy card"},
        400: {"description": "Missing username"},
        404: {"description": "User not found or GitHub API error"},
    },
)
async def trophy_card(
    username: str | None = None,
    theme: str | None = None,
    use_case: RenderTrophyCardUseCase = Depends(get_use_case),
) -> Response:
    """Render the trophy card SVG for a GitHub user."""
    request = StatRequest.from_query(username, theme)
    svg = await use_case.execute(request)
    return Response(
        content=svg,
        media_type=SVG_MEDIA_TYPE,
        headers={"Cache-Control": CACHE_CONTROL},
    )
