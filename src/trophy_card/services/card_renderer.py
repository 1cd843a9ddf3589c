"""SVG trophy card renderer.

Turns an ordered list of :class:`Trophy` into a single SVG document: one
fixed-size tile per trophy, laid out left to right.  The renderer is a pure
function of its inputs, so the same trophies and theme always produce
byte-identical output.
"""

from __future__ import annotations

from typing import Sequence
from xml.sax.saxutils import escape

from trophy_card.domain.entities import RankTier, Trophy
from trophy_card.services.themes import resolve_theme

# ── Layout constants ────────────────────────────────────────────────────────

TILE_WIDTH = 110
TILE_HEIGHT = 110

_FONT = "'Segoe UI', Ubuntu, Arial, Sans-Serif"

# Gradient id and (top, bottom) stop colours for each tier.
_RANK_GRADIENTS: dict[RankTier, tuple[str, str, str]] = {
    RankTier.SSS: ("rank-sss", "#fff6a5", "#ff9d00"),
    RankTier.SS: ("rank-ss", "#ffe08a", "#e0a800"),
    RankTier.S: ("rank-s", "#fbd46d", "#c98a1b"),
    RankTier.A: ("rank-a", "#e3e9f0", "#9aa7b4"),
    RankTier.B: ("rank-b", "#f3c79b", "#b06a34"),
    RankTier.C: ("rank-c", "#b8d9c0", "#5f9a6e"),
    RankTier.D: ("rank-d", "#d0d0d0", "#7a7a7a"),
}

_XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def _esc(value: object) -> str:
    """Escape *value* for use in both element text and quoted attributes."""
    return escape(str(value), _XML_ENTITIES)


def _gradient_defs(trophies: Sequence[Trophy]) -> str:
    used = {t.rank for t in trophies}
    parts: list[str] = []
    for tier in sorted(used, key=lambda r: r.order, reverse=True):
        gradient_id, top, bottom = _RANK_GRADIENTS[tier]
        parts.append(
            f'<linearGradient id="{_esc(gradient_id)}" x1="0" y1="0" x2="0" y2="1">'
            f'<stop offset="0%" stop-color="{_esc(top)}"/>'
            f'<stop offset="100%" stop-color="{_esc(bottom)}"/>'
            "</linearGradient>"
        )
    return "".join(parts)


def _render_tile(index: int, trophy: Trophy, background: str, text: str, rank_colour: str, border: str) -> str:
    gradient_id = _RANK_GRADIENTS[trophy.rank][0]
    x = index * TILE_WIDTH
    return (
        f'<g transform="translate({x}, 0)">'
        f'<rect x="5" y="5" width="100" height="100" rx="10" fill="{_esc(background)}" '
        f'stroke="{_esc(border)}" stroke-width="2"/>'
        f'<text x="55" y="24" text-anchor="middle" class="label" fill="{_esc(text)}">'
        f"{_esc(trophy.name)}</text>"
        f'<circle cx="55" cy="54" r="22" fill="url(#{_esc(gradient_id)})" fill-opacity="0.45"/>'
        f'<text x="55" y="64" text-anchor="middle" class="rank" fill="{_esc(rank_colour)}">'
        f"{_esc(trophy.rank.value)}</text>"
        f'<text x="55" y="94" text-anchor="middle" class="value" fill="{_esc(text)}">'
        f"{_esc(trophy.value)} total</text>"
        "</g>"
    )


def render_card(trophies: Sequence[Trophy], theme_key: str | None = None) -> str:
    """Render *trophies* as an SVG document using the palette named *theme_key*.

    Unknown theme names fall back to the default palette.  The document is
    ``TILE_WIDTH * len(trophies)`` wide and ``TILE_HEIGHT`` tall.
    """
    theme = resolve_theme(theme_key)
    width = TILE_WIDTH * len(trophies)
    tiles = "".join(
        _render_tile(i, t, theme.background, theme.text, theme.rank, theme.border)
        for i, t in enumerate(trophies)
    )
    return (
        f'<svg width="{width}" height="{TILE_HEIGHT}" viewBox="0 0 {width} {TILE_HEIGHT}" '
        'xmlns="http://www.w3.org/2000/svg">'
        "<style>"
        f".label {{ font: 700 12px {_FONT}; }} "
        f".rank {{ font: 700 28px {_FONT}; }} "
        f".value {{ font: 400 10px {_FONT}; }}"
        "</style>"
        f"<defs>{_gradient_defs(trophies)}</defs>"
        f"{tiles}"
        "</svg>\n"
    )
