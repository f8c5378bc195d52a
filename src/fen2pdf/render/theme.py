"""Visual constants for rasterized board diagrams."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from fen2pdf.core.board import BOARD_SIZE


@dataclass(frozen=True)
class DiagramTheme:
    """Colour scheme and resolution of a diagram raster."""

    square_px: int
    light_square: QColor
    dark_square: QColor

    @property
    def image_px(self) -> int:
        return self.square_px * BOARD_SIZE

    @classmethod
    def default(cls) -> DiagramTheme:
        return cls(
            square_px=75,  # 600 px board, crisp at 50 mm
            light_square=QColor(255, 255, 255),
            dark_square=QColor(221, 221, 221),  # light gray, printer friendly
        )
