"""Build piece snapshots from FEN placement fields."""

from __future__ import annotations

from outpost.core.piece import PieceObservation
from outpost.core.types import coords_to_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def snapshot_from_fen(fen: str) -> list[PieceObservation]:
    """Parse the piece-placement field of *fen* into observations.

    Only the first field is read; side to move, castling and the clocks
    do not affect influence and are ignored.
    """
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")

    ranks = parts[0].split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    pieces: list[PieceObservation] = []
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                sq = coords_to_square(file, rank)
                if sq is None:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                pieces.append(PieceObservation.from_char(ch, sq))
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    return pieces
