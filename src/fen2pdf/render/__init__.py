"""Rendering package: diagram rasters, page layout and PDF output."""

from fen2pdf.render.diagram import DiagramCell, diagram_cells, rasterize
from fen2pdf.render.layout import (
    GridSlot,
    Page,
    PlacedDiagram,
    Rect,
    RenderedPage,
    TextBlock,
    compose_pages,
    grid_slot,
    layout,
    paginate,
    split_caption,
)
from fen2pdf.render.pdf import PdfStudyWriter
from fen2pdf.render.resources import glyph_table
from fen2pdf.render.theme import DiagramTheme

__all__ = [
    "DiagramCell",
    "DiagramTheme",
    "GridSlot",
    "Page",
    "PdfStudyWriter",
    "PlacedDiagram",
    "Rect",
    "RenderedPage",
    "TextBlock",
    "compose_pages",
    "diagram_cells",
    "glyph_table",
    "grid_slot",
    "layout",
    "paginate",
    "rasterize",
    "split_caption",
]
