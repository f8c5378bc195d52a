"""Command-line entry point: ``fen2pdf <study-id>``."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn

from fen2pdf.config import LayoutConfig
from fen2pdf.core.notation import parse_study
from fen2pdf.errors import Fen2PdfError
from fen2pdf.fetch import LichessStudyClient

_LOGGER = logging.getLogger(__name__)

CAPTION_NOTE = (
    "Note: A colon (:) in position descriptions triggers a line feed in the PDF"
)


class _StudyArgumentParser(argparse.ArgumentParser):
    """Argument parser that repeats the caption convention on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        print(CAPTION_NOTE, file=sys.stderr)
        self.exit(2, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _StudyArgumentParser(
        prog="fen2pdf",
        description="Render the positions of a Lichess study as a printable PDF.",
        epilog=CAPTION_NOTE,
    )
    parser.add_argument("study_id", help="Lichess study identifier")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="output file (default: derived from the study title)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def _ensure_gui_application() -> object:
    """Return the running QGuiApplication, creating an offscreen one if needed."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PyQt6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication(["fen2pdf"])
    return app


def run(study_id: str, output: Path | None = None) -> Path:
    """Download, lay out and write one study; returns the PDF path."""
    from fen2pdf.render import PdfStudyWriter, compose_pages, rasterize

    _LOGGER.info("Using Lichess study ID: %s", study_id)
    text = LichessStudyClient().fetch_study(study_id)

    document = parse_study(text)
    _LOGGER.info(
        "Found %d positions in study: %s", len(document.records), document.title
    )

    target = output or Path(document.output_filename)
    config = LayoutConfig()
    _app = _ensure_gui_application()  # must stay alive while painting
    PdfStudyWriter(config).write(
        document.title, compose_pages(document, rasterize, config), target
    )
    return target


def main(argv: list[str] | None = None) -> int:
    """Run the command and return the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    try:
        target = run(args.study_id, args.output)
    except Fen2PdfError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    _LOGGER.info("Generated PDF: %s", target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
