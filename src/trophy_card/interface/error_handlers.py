"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and a plain-text
body.  Diagnostic detail is logged; the body is always the exception's
generic ``public_message``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from trophy_card.domain.exceptions import (
    MissingUsernameError,
    TrophyCardError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[TrophyCardError], int]] = [
    (MissingUsernameError, 400),
    (UpstreamError, 404),
]


def _error_text(status_code: int, message: str) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    for exc_type, code in _EXCEPTION_STATUS:

        def _make_handler(
            status_code: int,
        ):  # type: ignore[no-untyped-def]
            async def handler(request: Request, exc: Exception) -> PlainTextResponse:
                logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
                message = getattr(exc, "public_message", TrophyCardError.public_message)
                return _error_text(status_code, message)

            return handler

        app.add_exception_handler(exc_type, _make_handler(code))

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> PlainTextResponse:
        logger.warning("Invalid request on %s: %s", request.url.path, exc.errors())
        return _error_text(400, "Error: Invalid request parameters")

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> PlainTextResponse:
        logger.exception("Unhandled exception")
        return _error_text(500, "An unexpected error occurred. Please try again later.")
