"""Named styles and glyphs for the transcript.

All colors are Rich style strings; the renderer never emits raw ANSI.
"""

from __future__ import annotations

from enum import StrEnum

# ── Styles ────────────────────────────────────────────────────────

STYLE = {
    "bracket": "dim",
    "tool": "bold cyan",
    "key": "yellow",
    "string": "green",
    "other": "magenta",
    "muted": "dim",
    "error": "red",
}


# ── Checklist status ──────────────────────────────────────────────


class ItemStatus(StrEnum):
    """Status values of a checklist-shaped list item."""

    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    PENDING = "pending"


_STATUS_GLYPHS: dict[ItemStatus, tuple[str, str]] = {
    ItemStatus.COMPLETED: ("✓", "green"),
    ItemStatus.IN_PROGRESS: ("→", "cyan"),
}

_DEFAULT_GLYPH = ("○", "dim")


def status_glyph(status: object) -> tuple[str, str]:
    """Return ``(glyph, style)`` for a checklist status.

    Unknown, missing, or non-string statuses fall back to the open circle.
    """
    if not isinstance(status, str):
        return _DEFAULT_GLYPH
    try:
        return _STATUS_GLYPHS.get(ItemStatus(status), _DEFAULT_GLYPH)
    except ValueError:
        return _DEFAULT_GLYPH
