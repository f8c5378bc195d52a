"""PDF writer: paints laid-out pages with QPainter on a QPdfWriter."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from PyQt6.QtCore import QBuffer, QIODevice, QMarginsF, QPointF, QRectF, QSizeF
from PyQt6.QtGui import QColor, QFont, QPageLayout, QPageSize, QPainter, QPdfWriter

from fen2pdf.config import LayoutConfig
from fen2pdf.errors import OutputError
from fen2pdf.render.layout import Rect, RenderedPage, TextBlock

_LOGGER = logging.getLogger(__name__)

_MM_PER_INCH = 25.4


class PdfStudyWriter:
    """Writes rendered pages to a single PDF file.

    The whole document is painted into memory first; the target file is only
    created once painting has succeeded.
    """

    FONT_FAMILY = "Times"
    RESOLUTION = 300  # dpi

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self._config = config or LayoutConfig()
        self._scale = self.RESOLUTION / _MM_PER_INCH  # device px per mm

    # ── Public API ───────────────────────────────────────────────────────

    def write(self, title: str, pages: Iterable[RenderedPage], path: Path) -> int:
        """Paint *pages* and save them to *path*; returns the page count."""
        data, written = self._render(title, pages)
        try:
            path.write_bytes(data)
        except OSError as exc:
            raise OutputError(f"Cannot write {path}: {exc}") from exc
        _LOGGER.info("Wrote %d page(s) to %s", written, path)
        return written

    # ── Painting ─────────────────────────────────────────────────────────

    def _render(self, title: str, pages: Iterable[RenderedPage]) -> tuple[bytes, int]:
        buffer = QBuffer()
        buffer.open(QIODevice.OpenModeFlag.WriteOnly)

        writer = QPdfWriter(buffer)
        writer.setTitle(title)
        writer.setCreator("fen2pdf")
        writer.setResolution(self.RESOLUTION)
        writer.setPageSize(
            QPageSize(
                QSizeF(self._config.page_width, self._config.page_height),
                QPageSize.Unit.Millimeter,
            )
        )
        writer.setPageMargins(QMarginsF(0, 0, 0, 0), QPageLayout.Unit.Millimeter)

        painter = QPainter()
        if not painter.begin(writer):
            raise OutputError("Cannot start PDF painter")
        written = 0
        try:
            painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
            painter.setPen(QColor(0, 0, 0))
            for rendered in pages:
                if written and not writer.newPage():
                    raise OutputError("Cannot start a new PDF page")
                self._paint_page(painter, rendered)
                written += 1
        finally:
            painter.end()
        buffer.close()
        return buffer.data().data(), written

    def _paint_page(self, painter: QPainter, rendered: RenderedPage) -> None:
        page = rendered.page
        self._draw_text(painter, page.title)
        self._draw_text(painter, page.page_number)
        for placed, image in zip(page.diagrams, rendered.images, strict=True):
            painter.drawImage(self._device_rect(placed.board), image)
            for block in (*placed.caption, *placed.file_labels, *placed.rank_labels):
                self._draw_text(painter, block)

    def _draw_text(self, painter: QPainter, block: TextBlock) -> None:
        font = QFont(self.FONT_FAMILY)
        font.setPointSizeF(block.size)
        painter.setFont(font)
        origin = QPointF(block.x * self._scale, block.y * self._scale)
        painter.drawText(origin, block.text)

    def _device_rect(self, rect: Rect) -> QRectF:
        s = self._scale
        return QRectF(rect.x * s, rect.y * s, rect.width * s, rect.height * s)
