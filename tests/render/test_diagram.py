"""Tests for board diagram rasterization."""

from __future__ import annotations

from types import MappingProxyType

import pytest
from PyQt6.QtGui import QColor

from fen2pdf.core.board import BLANK
from fen2pdf.errors import AssetError
from fen2pdf.render.diagram import diagram_cells, rasterize
from fen2pdf.render.theme import DiagramTheme

_FEN = "r3k2r/pp3ppp/8/3N4/8/8/PPP2PPP/2KR3R w kq - 0 1"
_FEN_BLACK = _FEN.replace(" w ", " b ")
_EMPTY_WHITE = "8/8/8/8/8/8/8/8 w - - 0 1"
_EMPTY_BLACK = "8/8/8/8/8/8/8/8 b - - 0 1"


def _pixel(image, x: int, y: int) -> QColor:
    return image.pixelColor(x, y)


class TestDiagramCells:
    def test_sixty_four_cells_in_image_order(self, make_record) -> None:
        cells = diagram_cells(make_record(fen=_FEN))
        assert len(cells) == 64
        assert [(c.rank, c.file) for c in cells[:3]] == [(0, 0), (0, 1), (0, 2)]
        assert (cells[-1].rank, cells[-1].file) == (7, 7)

    def test_white_to_move_keeps_orientation(self, make_record) -> None:
        cells = diagram_cells(make_record(fen=_FEN))
        assert cells[0].symbol == "r"  # a8 top-left
        assert cells[0].light is True
        assert cells[63].symbol == "R"  # h1 bottom-right

    def test_black_to_move_is_point_reflected(self, make_record) -> None:
        normal = diagram_cells(make_record(fen=_FEN))
        flipped = diagram_cells(make_record(fen=_FEN_BLACK))
        for cell in flipped:
            mirror = normal[(7 - cell.rank) * 8 + (7 - cell.file)]
            assert cell.symbol == mirror.symbol
            assert cell.light == mirror.light
            assert cell.display_rank == 7 - cell.rank
            assert cell.display_file == 7 - cell.file

    def test_checkerboard_parity(self, make_record) -> None:
        cells = diagram_cells(make_record(fen=_EMPTY_WHITE))
        assert all(c.light == ((c.rank + c.file) % 2 == 0) for c in cells)
        assert all(c.symbol == BLANK for c in cells)


@pytest.mark.usefixtures("qapp")
class TestRasterize:
    def test_default_resolution(self, make_record) -> None:
        image = rasterize(make_record(fen=_EMPTY_WHITE))
        assert (image.width(), image.height()) == (600, 600)

    def test_square_colours(self, make_record) -> None:
        theme = DiagramTheme.default()
        image = rasterize(make_record(fen=_EMPTY_WHITE), theme)
        assert _pixel(image, 10, 10) == theme.light_square
        assert _pixel(image, 75 + 10, 10) == theme.dark_square
        assert _pixel(image, 75 + 10, 75 + 10) == theme.light_square

    def test_mirrored_empty_board_matches_rotation(self, make_record) -> None:
        normal = rasterize(make_record(fen=_EMPTY_WHITE))
        flipped = rasterize(make_record(fen=_EMPTY_BLACK))
        for x, y in [(5, 5), (80, 5), (300, 420), (590, 130)]:
            assert _pixel(flipped, x, y) == _pixel(normal, 599 - x, 599 - y)

    def test_glyph_is_drawn_over_background(self, make_record) -> None:
        theme = DiagramTheme.default()
        image = rasterize(make_record(fen="k7/8/8/8/8/8/8/8 w - - 0 1"), theme)
        # The foot of the king covers the lower part of a8; its corner stays clear.
        assert _pixel(image, 25, 62) != theme.light_square
        assert _pixel(image, 1, 1) == theme.light_square

    def test_unknown_symbol_leaves_background(self, make_record) -> None:
        theme = DiagramTheme.default()
        image = rasterize(make_record(fen="x7/8/8/8/8/8/8/8 w - - 0 1"), theme)
        assert _pixel(image, 25, 62) == theme.light_square

    def test_custom_resolution(self, make_record) -> None:
        theme = DiagramTheme(
            square_px=10,
            light_square=QColor(255, 255, 255),
            dark_square=QColor(0, 0, 0),
        )
        image = rasterize(make_record(fen=_EMPTY_WHITE), theme, glyphs={})
        assert image.width() == 80
        assert _pixel(image, 15, 5) == QColor(0, 0, 0)

    def test_corrupt_glyph_raises_asset_error(self, make_record) -> None:
        glyphs = MappingProxyType({"k": b"definitely not svg"})
        with pytest.raises(AssetError, match="'k'"):
            rasterize(make_record(fen="k7/8/8/8/8/8/8/8 w - - 0 1"), glyphs=glyphs)
