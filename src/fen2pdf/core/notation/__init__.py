"""Notation package: FEN fields and Lichess study parsing."""

from fen2pdf.core.notation.fen import placement_field, second_side_to_move
from fen2pdf.core.notation.models import DEFAULT_TITLE, PositionRecord, StudyDocument
from fen2pdf.core.notation.study import (
    StudyAccumulator,
    looks_like_study,
    parse_study,
    parse_tag_line,
)

__all__ = [
    "DEFAULT_TITLE",
    "PositionRecord",
    "StudyAccumulator",
    "StudyDocument",
    "looks_like_study",
    "parse_study",
    "parse_tag_line",
    "placement_field",
    "second_side_to_move",
]
