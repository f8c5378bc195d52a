"""Piece glyph table backed by the bundled SVG assets."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from PyQt6.QtCore import QByteArray
from PyQt6.QtSvg import QSvgRenderer

from fen2pdf.core.piece import Piece
from fen2pdf.errors import AssetError

_ASSETS_DIR = Path(__file__).resolve().parents[1] / "assets" / "pieces"

GlyphTable = Mapping[str, bytes]


@lru_cache(maxsize=1)
def glyph_table() -> GlyphTable:
    """Return the read-only FEN symbol → SVG bytes table.

    Loaded once per process from the packaged ``pieces`` directory.
    """
    table: dict[str, bytes] = {}
    for piece in Piece.all():
        path = _ASSETS_DIR / piece.asset_name
        try:
            table[str(piece)] = path.read_bytes()
        except OSError as exc:
            raise AssetError(f"Glyph asset not readable: {path}") from exc
    return MappingProxyType(table)


# Cache SVG renderers (one per distinct glyph payload)
_renderers: dict[bytes, QSvgRenderer] = {}


def glyph_renderer(symbol: str, data: bytes) -> QSvgRenderer:
    """Load and cache the QSvgRenderer for one glyph payload."""
    renderer = _renderers.get(data)
    if renderer is None:
        renderer = QSvgRenderer(QByteArray(data))
        if not renderer.isValid():
            raise AssetError(f"Glyph for {symbol!r} is not valid SVG data")
        _renderers[data] = renderer
    return renderer
