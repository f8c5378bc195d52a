"""Diagram rasterizer — one FEN record to a fixed-size board image."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QImage, QPainter

from fen2pdf.core.board import BOARD_SIZE, is_blank
from fen2pdf.core.notation import PositionRecord
from fen2pdf.render.resources import GlyphTable, glyph_renderer, glyph_table
from fen2pdf.render.theme import DiagramTheme

_LAST = BOARD_SIZE - 1


@dataclass(frozen=True, slots=True)
class DiagramCell:
    """One square of the rendered image.

    ``rank``/``file`` locate the square in the image (0, 0 = top-left);
    ``display_rank``/``display_file`` index the decoded grid.
    """

    rank: int
    file: int
    display_rank: int
    display_file: int
    light: bool
    symbol: str


def diagram_cells(record: PositionRecord) -> tuple[DiagramCell, ...]:
    """Return the 64 image cells of *record*, row-major from the top-left.

    When black is to move both axes are mirrored so the side to move is
    drawn nearest the viewer.
    """
    grid = record.grid
    flipped = record.side_to_move_is_second
    cells: list[DiagramCell] = []
    for rank in range(BOARD_SIZE):
        for file in range(BOARD_SIZE):
            display_rank = _LAST - rank if flipped else rank
            display_file = _LAST - file if flipped else file
            cells.append(
                DiagramCell(
                    rank=rank,
                    file=file,
                    display_rank=display_rank,
                    display_file=display_file,
                    light=(display_rank + display_file) % 2 == 0,
                    symbol=grid[display_rank][display_file],
                )
            )
    return tuple(cells)


def rasterize(
    record: PositionRecord,
    theme: DiagramTheme | None = None,
    glyphs: GlyphTable | None = None,
) -> QImage:
    """Render *record* as a square RGB image.

    Raises:
        AssetError: a glyph needed by the position cannot be decoded.
    """
    theme = theme or DiagramTheme.default()
    glyphs = glyph_table() if glyphs is None else glyphs
    size = theme.square_px

    image = QImage(theme.image_px, theme.image_px, QImage.Format.Format_RGB32)
    image.fill(theme.light_square)

    painter = QPainter(image)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
    try:
        for cell in diagram_cells(record):
            target = QRectF(cell.file * size, cell.rank * size, size, size)
            color = theme.light_square if cell.light else theme.dark_square
            painter.fillRect(target, color)

            if is_blank(cell.symbol):
                continue
            data = glyphs.get(cell.symbol)
            if data is None:
                continue
            glyph_renderer(cell.symbol, data).render(painter, target)
    finally:
        painter.end()
    return image
