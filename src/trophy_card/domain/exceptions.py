"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.  The
exception message carries diagnostic detail for the logs, while
``public_message`` is the only text a caller ever sees.
"""

from __future__ import annotations


class TrophyCardError(Exception):
    """Base exception for the entire application."""

    public_message = "An unexpected error occurred."


# ── Input validation ────────────────────────────────────────────────────────


class MissingUsernameError(TrophyCardError):
    """The request did not supply a GitHub username."""

    public_message = "Error: Username is required"


# ── GitHub API errors ───────────────────────────────────────────────────────


class UpstreamError(TrophyCardError):
    """The GitHub API could not be reached, reported an error, or replied garbage.

    Unknown users, network failures and malformed payloads all land here.
    """

    public_message = "User not found or API error"
