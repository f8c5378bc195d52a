"""Core domain layer — pure chess data with zero external dependencies.

Quick start::

    from fen2pdf.core import parse_study

    document = parse_study(pgn_text)
    for record in document.records:
        print(record.sequence_number, record.caption, record.grid[0])
"""

from fen2pdf.core.board import BLANK, Grid, decode_placement, empty_grid
from fen2pdf.core.enums import Color, PieceType
from fen2pdf.core.notation import (
    DEFAULT_TITLE,
    PositionRecord,
    StudyAccumulator,
    StudyDocument,
    looks_like_study,
    parse_study,
)
from fen2pdf.core.piece import Piece

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Board
    "BLANK",
    "Grid",
    "decode_placement",
    "empty_grid",
    # Domain objects
    "Piece",
    "PositionRecord",
    "StudyDocument",
    # Notation
    "DEFAULT_TITLE",
    "StudyAccumulator",
    "looks_like_study",
    "parse_study",
]
