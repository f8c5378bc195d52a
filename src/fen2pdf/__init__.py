"""fen2pdf — print Lichess studies as paginated board diagrams."""

__version__ = "0.1.0"
