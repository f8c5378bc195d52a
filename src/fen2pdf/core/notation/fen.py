"""Helpers for the fields of a full FEN string."""

from __future__ import annotations

# Side-to-move field for black, delimited by the surrounding fields.
_SECOND_SIDE_MARKER = " b "


def placement_field(fen: str) -> str:
    """Return the piece-placement field (first field) of *fen*."""
    parts = fen.split()
    return parts[0] if parts else ""


def second_side_to_move(fen: str) -> bool:
    """Return True when the side-to-move field of *fen* names black."""
    return _SECOND_SIDE_MARKER in fen
