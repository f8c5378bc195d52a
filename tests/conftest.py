"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from fen2pdf.core.notation import PositionRecord, StudyDocument

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QGuiApplication for rendering tests."""
    from PyQt6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication([])
    yield app


def _record(
    number: int = 1,
    caption: str = "Chapter",
    fen: str = STARTING_FEN,
) -> PositionRecord:
    return PositionRecord(
        sequence_number=number,
        caption=caption,
        fen=fen,
        board_string=fen.split()[0],
        side_to_move_is_second=" b " in fen,
    )


def _document(count: int, title: str = "Test Study") -> StudyDocument:
    return StudyDocument(
        title=title,
        records=tuple(_record(i, f"Chapter {i}") for i in range(1, count + 1)),
    )


@pytest.fixture
def make_record() -> Callable[..., PositionRecord]:
    """Factory for standalone position records."""
    return _record


@pytest.fixture
def make_document() -> Callable[..., StudyDocument]:
    """Factory for documents with *count* numbered starting positions."""
    return _document
