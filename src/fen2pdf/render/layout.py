"""Page layout engine: places study positions on a paginated grid.

All geometry is in millimetres with the origin at the top-left corner of
the page; text ``y`` values are baselines. The pure part (:func:`layout`)
has no Qt dependency; :func:`compose_pages` pairs each placed diagram with
its raster.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fen2pdf.config import LayoutConfig
from fen2pdf.core.board import BOARD_SIZE
from fen2pdf.core.notation import PositionRecord, StudyDocument

if TYPE_CHECKING:
    from PyQt6.QtGui import QImage

_LOGGER = logging.getLogger(__name__)

CAPTION_DELIMITER = ":"
FILES = "abcdefgh"
RANKS = "12345678"

Rasterizer = Callable[[PositionRecord], "QImage"]


# ── Geometry value objects ───────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True, slots=True)
class GridSlot:
    """Cell of the page grid; ``row`` 0 is the top row."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class TextBlock:
    text: str
    x: float
    y: float
    size: float


@dataclass(frozen=True, slots=True)
class PlacedDiagram:
    """A record positioned on its page with all of its text."""

    record: PositionRecord
    slot: GridSlot
    cell: Rect
    board: Rect
    caption: tuple[TextBlock, ...]
    file_labels: tuple[TextBlock, ...]
    rank_labels: tuple[TextBlock, ...]


@dataclass(frozen=True, slots=True)
class Page:
    index: int
    count: int
    title: TextBlock
    page_number: TextBlock
    diagrams: tuple[PlacedDiagram, ...]


@dataclass(frozen=True, slots=True)
class RenderedPage:
    """A page together with one raster per placed diagram."""

    page: Page
    images: tuple[Any, ...]


# ── Pagination ───────────────────────────────────────────────────────────────


def page_count(record_count: int, per_page: int = 9) -> int:
    return math.ceil(record_count / per_page)


def paginate(
    records: Sequence[PositionRecord], per_page: int = 9
) -> list[tuple[PositionRecord, ...]]:
    """Split *records* into consecutive chunks of at most *per_page*."""
    return [
        tuple(records[start : start + per_page])
        for start in range(0, len(records), per_page)
    ]


def grid_slot(index: int, columns: int = 3, rows: int = 3) -> GridSlot:
    """Map the 0-based index within a page to its grid slot.

    The first row of records goes to the bottom row of the grid and later
    rows move upward.
    """
    return GridSlot(row=(rows - 1) - index // columns, col=index % columns)


def cell_rect(slot: GridSlot, config: LayoutConfig) -> Rect:
    """Return the grid cell for *slot* inside the usable page area."""
    top = config.margin_top + config.title_clearance
    usable_width = config.page_width - config.margin_left - config.margin_right
    usable_height = config.page_height - top - config.margin_bottom
    col_width = usable_width / config.columns
    row_height = usable_height / config.rows
    return Rect(
        x=config.margin_left + slot.col * col_width,
        y=top + slot.row * row_height,
        width=col_width,
        height=row_height,
    )


def board_rect(cell: Rect, config: LayoutConfig) -> Rect:
    """Centre the board in *cell*, leaving room for two caption lines."""
    block_height = config.board_size + config.caption_gap + config.caption_line_height
    return Rect(
        x=cell.x + (cell.width - config.board_size) / 2,
        y=cell.y + (cell.height - block_height) / 2,
        width=config.board_size,
        height=config.board_size,
    )


# ── Text ─────────────────────────────────────────────────────────────────────


def split_caption(sequence_number: int, caption: str) -> tuple[str, str]:
    """Split a caption at its first ``:`` into two display lines."""
    head, sep, tail = caption.partition(CAPTION_DELIMITER)
    if not sep:
        return f"{sequence_number}. {caption}", ""
    return f"{sequence_number}. {head}{sep}", tail.strip()


def file_labels(mirrored: bool) -> str:
    """File letters left to right as displayed."""
    return FILES[::-1] if mirrored else FILES


def rank_labels(mirrored: bool) -> str:
    """Rank digits top to bottom as displayed."""
    return RANKS if mirrored else RANKS[::-1]


def centered_x(text: str, char_width: float, page_width: float) -> float:
    """Left edge that roughly centres *text*, from a per-character width."""
    return (page_width - len(text) * char_width) / 2


def _caption_blocks(
    record: PositionRecord, board: Rect, config: LayoutConfig
) -> tuple[TextBlock, ...]:
    first, second = split_caption(record.sequence_number, record.caption)
    baseline = board.bottom + config.caption_gap
    blocks = [TextBlock(first, board.x, baseline, config.caption_size)]
    if second:
        blocks.append(
            TextBlock(
                second,
                board.x,
                baseline + config.caption_line_height,
                config.caption_size,
            )
        )
    return tuple(blocks)


def _coordinate_blocks(
    mirrored: bool, board: Rect, config: LayoutConfig
) -> tuple[tuple[TextBlock, ...], tuple[TextBlock, ...]]:
    square = board.width / BOARD_SIZE
    size = config.coordinate_size
    file_y = board.bottom + 3.0
    rank_x = board.x - 2.5
    files = tuple(
        TextBlock(label, board.x + (i + 0.5) * square - 0.8, file_y, size)
        for i, label in enumerate(file_labels(mirrored))
    )
    ranks = tuple(
        TextBlock(label, rank_x, board.y + (i + 0.5) * square + 0.8, size)
        for i, label in enumerate(rank_labels(mirrored))
    )
    return files, ranks


def place_diagram(
    record: PositionRecord, index: int, config: LayoutConfig
) -> PlacedDiagram:
    """Place the *index*-th record of a page."""
    slot = grid_slot(index, config.columns, config.rows)
    cell = cell_rect(slot, config)
    board = board_rect(cell, config)
    files, ranks = _coordinate_blocks(record.side_to_move_is_second, board, config)
    return PlacedDiagram(
        record=record,
        slot=slot,
        cell=cell,
        board=board,
        caption=_caption_blocks(record, board, config),
        file_labels=files,
        rank_labels=ranks,
    )


# ── Public API ───────────────────────────────────────────────────────────────


def layout(document: StudyDocument, config: LayoutConfig | None = None) -> list[Page]:
    """Compute every page of *document*; pure geometry, no rendering."""
    config = config or LayoutConfig()
    chunks = paginate(document.records, config.per_page)
    count = page_count(len(document.records), config.per_page)
    title = TextBlock(
        document.title,
        centered_x(document.title, config.title_char_width, config.page_width),
        config.title_y,
        config.title_size,
    )
    pages: list[Page] = []
    for index, chunk in enumerate(chunks):
        number = f"{index + 1}/{count}"
        pages.append(
            Page(
                index=index,
                count=count,
                title=title,
                page_number=TextBlock(
                    number,
                    centered_x(
                        number, config.page_number_char_width, config.page_width
                    ),
                    config.page_number_y,
                    config.page_number_size,
                ),
                diagrams=tuple(
                    place_diagram(record, i, config) for i, record in enumerate(chunk)
                ),
            )
        )
    return pages


def compose_pages(
    document: StudyDocument,
    rasterizer: Rasterizer,
    config: LayoutConfig | None = None,
) -> Iterator[RenderedPage]:
    """Lay out *document* and rasterize each page's diagrams on demand."""
    for page in layout(document, config):
        _LOGGER.debug(
            "Rendering page %d/%d (%d diagrams)",
            page.index + 1,
            page.count,
            len(page.diagrams),
        )
        images = tuple(rasterizer(placed.record) for placed in page.diagrams)
        yield RenderedPage(page=page, images=images)
