"""Board - best-effort decoding of FEN piece placement into an 8x8 grid."""

from __future__ import annotations

BOARD_SIZE = 8
BLANK = " "

# grid[rank][file]; rank 0 is the first slash-delimited group (rank 8).
Grid = tuple[tuple[str, ...], ...]


def empty_grid() -> Grid:
    """Return a grid with every square blank."""
    return tuple((BLANK,) * BOARD_SIZE for _ in range(BOARD_SIZE))


def decode_placement(board_string: str) -> Grid:
    """Decode the placement field of a FEN string.

    Malformed input never raises: ranks past the eighth are ignored, missing
    ranks stay blank, and squares written past the h-file are dropped.
    """
    rows = [[BLANK] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for rank_idx, rank_text in enumerate(board_string.split("/")[:BOARD_SIZE]):
        row = rows[rank_idx]
        file = 0
        for ch in rank_text:
            if "0" <= ch <= "9":
                file += int(ch)
                continue
            if file < BOARD_SIZE:
                row[file] = ch
            file += 1
    return tuple(tuple(row) for row in rows)


def is_blank(symbol: str) -> bool:
    return symbol == BLANK
