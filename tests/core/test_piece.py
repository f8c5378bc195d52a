"""Tests for the Piece value object."""

import pytest

from fen2pdf.core.enums import Color, PieceType
from fen2pdf.core.piece import Piece


class TestPiece:
    def test_from_char_white_knight(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_str_round_trips_fen_char(self) -> None:
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"

    def test_invalid_char_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_all_covers_twelve_pieces(self) -> None:
        pieces = Piece.all()
        assert len(pieces) == 12
        assert {str(p) for p in pieces} == set("PNBRQKpnbrqk")

    def test_asset_name(self) -> None:
        assert Piece.from_char("n").asset_name == "knight-b.svg"
        assert Piece.from_char("K").asset_name == "king-w.svg"
