"""Study records produced by the tagged-text parser."""

from __future__ import annotations

from dataclasses import dataclass

from fen2pdf.core.board import Grid, decode_placement

DEFAULT_TITLE = "Chess Positions"


@dataclass(frozen=True, slots=True)
class PositionRecord:
    """One captioned board position of a study."""

    sequence_number: int
    caption: str
    fen: str
    board_string: str
    side_to_move_is_second: bool

    @property
    def grid(self) -> Grid:
        """Decoded placement, ``grid[rank][file]`` with rank 0 = rank 8."""
        return decode_placement(self.board_string)


@dataclass(frozen=True, slots=True)
class StudyDocument:
    """Title plus the ordered positions of a study."""

    title: str
    records: tuple[PositionRecord, ...]

    @property
    def output_filename(self) -> str:
        """File name of the PDF generated for this study."""
        return f"{self.title.replace(' ', '_').replace('.', '')}.pdf"
