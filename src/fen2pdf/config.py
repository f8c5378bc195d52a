"""Configuration values for page geometry and study download."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

LICHESS_URL_ENV = "FEN2PDF_LICHESS_URL"
DEFAULT_LICHESS_URL = "https://lichess.org"


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Page geometry in millimetres; text sizes in points.

    Defaults describe an A4 portrait page holding a 3×3 grid of diagrams.
    """

    page_width: float = 210.0
    page_height: float = 297.0
    margin_left: float = 30.0
    margin_right: float = 12.0
    margin_top: float = 35.0
    margin_bottom: float = 10.0
    title_clearance: float = 30.0  # extra space below the top margin for the title

    columns: int = 3
    rows: int = 3

    board_size: float = 50.0
    caption_gap: float = 9.0  # board bottom → first caption baseline
    caption_line_height: float = 5.0

    title_y: float = 25.0  # baseline, from the top edge
    page_number_y: float = 287.0
    title_size: float = 18.0
    page_number_size: float = 14.0
    caption_size: float = 11.0
    coordinate_size: float = 6.0

    # Approximate advance per character used for centring.
    title_char_width: float = 1.8
    page_number_char_width: float = 1.2

    @property
    def per_page(self) -> int:
        return self.columns * self.rows


def _lichess_url_from_env() -> str:
    return os.getenv(LICHESS_URL_ENV, DEFAULT_LICHESS_URL).rstrip("/")


@dataclass(frozen=True, slots=True)
class FetchConfig:
    """Where study exports are downloaded from."""

    base_url: str = field(default_factory=_lichess_url_from_env)

    def study_url(self, study_id: str) -> str:
        return f"{self.base_url}/study/{study_id}.pgn"
