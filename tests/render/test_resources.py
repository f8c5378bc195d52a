"""Tests for the bundled piece glyph table."""

from __future__ import annotations

import pytest

from fen2pdf.errors import AssetError
from fen2pdf.render.resources import glyph_renderer, glyph_table


def test_glyph_table_has_every_piece() -> None:
    table = glyph_table()
    assert set(table) == set("PNBRQKpnbrqk")
    assert all(data.lstrip().startswith(b"<?xml") for data in table.values())


def test_glyph_table_is_read_only_and_shared() -> None:
    table = glyph_table()
    assert glyph_table() is table
    with pytest.raises(TypeError):
        table["K"] = b""  # type: ignore[index]


@pytest.mark.usefixtures("qapp")
def test_bundled_glyphs_are_valid_svg() -> None:
    for symbol, data in glyph_table().items():
        assert glyph_renderer(symbol, data).isValid()


@pytest.mark.usefixtures("qapp")
def test_invalid_glyph_raises() -> None:
    with pytest.raises(AssetError):
        glyph_renderer("Q", b"<svg")
