"""Error types raised by the study-to-PDF pipeline."""

from __future__ import annotations


class Fen2PdfError(Exception):
    """Base class for every failure the command reports to the user."""


class FetchError(Fen2PdfError):
    """Transport failure or non-success HTTP status while downloading."""


class NotFoundError(Fen2PdfError):
    """The downloaded content is empty or carries no study tags."""


class FormatError(Fen2PdfError, ValueError):
    """The study text did not yield any positions."""


class AssetError(Fen2PdfError):
    """A bundled piece glyph is missing or cannot be decoded."""


class OutputError(Fen2PdfError, OSError):
    """Writing the output document failed."""
