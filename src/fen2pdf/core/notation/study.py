"""Tagged-text (PGN header) parser for Lichess study exports.

A study export repeats a block of ``[Name "value"]`` header lines for every
chapter. A position is materialised once both its ``ChapterName`` and its
``FEN`` have arrived since the previous position, in either order.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from fen2pdf.core.notation.fen import placement_field, second_side_to_move
from fen2pdf.core.notation.models import DEFAULT_TITLE, PositionRecord, StudyDocument
from fen2pdf.errors import FormatError

_LOGGER = logging.getLogger(__name__)

_TAG_RE = re.compile(r'^\[(\w+)\s+"')
_EVENT_PREFIX = "WM25: "

TAG_STUDY_NAME = "StudyName"
TAG_CHAPTER_NAME = "ChapterName"
TAG_EVENT = "Event"
TAG_FEN = "FEN"


def parse_tag_line(line: str) -> tuple[str, str] | None:
    """Split a ``[Name "value"]`` line into ``(name, value)``.

    The value is everything between the first and the last double quote,
    so embedded quotes survive. Returns None for anything else.
    """
    match = _TAG_RE.match(line)
    if match is None:
        return None
    start = line.find('"')
    end = line.rfind('"')
    if end <= start:
        return None
    return match.group(1), line[start + 1 : end]


def looks_like_study(text: str) -> bool:
    """Return True when *text* is non-blank and carries study header tags."""
    if not text.strip():
        return False
    return f"[{TAG_EVENT}" in text or f"[{TAG_STUDY_NAME}" in text


@dataclass(slots=True)
class StudyAccumulator:
    """Single-pass state machine that turns header tags into records.

    Chapter name and FEN are two pending slots; :meth:`flush` emits a
    record and clears both exactly when both are filled.
    """

    pending_event_name: str = ""
    pending_chapter_name: str = ""
    pending_board_string: str = ""
    explicit_title_found: bool = False
    title: str = ""
    records: list[PositionRecord] = field(default_factory=list)
    _event_seen: bool = False

    # ── Transitions ──────────────────────────────────────────────────────

    def on_tag(self, name: str, value: str) -> None:
        """Apply one recognised tag; unknown tag names are ignored."""
        if name == TAG_STUDY_NAME:
            self.title = value
            self.explicit_title_found = True
        elif name == TAG_CHAPTER_NAME:
            self.pending_chapter_name = value
        elif name == TAG_EVENT:
            self.pending_event_name = value
            if not self._event_seen and not self.explicit_title_found:
                self.title = value.removeprefix(_EVENT_PREFIX)
            self._event_seen = True
        elif name == TAG_FEN:
            self.pending_board_string = value

    def flush(self) -> PositionRecord | None:
        """Emit a record if caption and FEN are both pending."""
        if not (self.pending_chapter_name and self.pending_board_string):
            return None
        fen = self.pending_board_string
        record = PositionRecord(
            sequence_number=len(self.records) + 1,
            caption=self.pending_chapter_name,
            fen=fen,
            board_string=placement_field(fen),
            side_to_move_is_second=second_side_to_move(fen),
        )
        self.records.append(record)
        self.pending_chapter_name = ""
        self.pending_board_string = ""
        return record

    def finish(self) -> StudyDocument:
        """Close the scan and build the immutable document."""
        if not self.records:
            raise FormatError("no positions")
        return StudyDocument(
            title=self.title or DEFAULT_TITLE,
            records=tuple(self.records),
        )


def parse_study(text: str) -> StudyDocument:
    """Parse a study export into a :class:`StudyDocument`.

    Raises:
        FormatError: no complete (ChapterName, FEN) pair was found.
    """
    acc = StudyAccumulator()
    for raw_line in text.splitlines():
        tag = parse_tag_line(raw_line.strip())
        if tag is not None:
            acc.on_tag(*tag)
        record = acc.flush()
        if record is not None:
            _LOGGER.debug(
                "Position %d: %s (%s)",
                record.sequence_number,
                record.caption,
                record.board_string,
            )
    return acc.finish()
