"""Named colour palettes for the trophy card."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from trophy_card.domain.value_objects import Theme

DEFAULT_THEME = "onedark"

THEMES: Mapping[str, Theme] = MappingProxyType(
    {
        "onedark": Theme(background="#282c34", text="#c8ccd4", rank="#e5c07b", border="#e06c75"),
        "light": Theme(background="#ffffff", text="#333333", rank="#d35400", border="#e67e22"),
        "dracula": Theme(background="#282a36", text="#f8f8f2", rank="#f1fa8c", border="#bd93f9"),
        "nord": Theme(background="#2e3440", text="#d8dee9", rank="#ebcb8b", border="#88c0d0"),
        "github_dark": Theme(background="#0d1117", text="#c9d1d9", rank="#58a6ff", border="#30363d"),
    }
)


def resolve_theme(key: str | None) -> Theme:
    """Look up *key*, falling back to the default palette for unknown names."""
    if key is None:
        return THEMES[DEFAULT_THEME]
    return THEMES.get(key.strip().lower(), THEMES[DEFAULT_THEME])
