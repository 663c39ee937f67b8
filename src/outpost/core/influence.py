"""Influence aggregation: per-square attacker counts for both colors."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from outpost.core.attacks import attacks_from
from outpost.core.enums import Color
from outpost.core.piece import PieceObservation
from outpost.core.types import ParseError, Square

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SquareInfluence:
    """Number of white and black pieces bearing on one square."""

    white: int = 0
    black: int = 0

    def count(self, color: Color) -> int:
        return self.white if color == Color.WHITE else self.black

    @property
    def total(self) -> int:
        return self.white + self.black

    def with_attacker(self, color: Color) -> SquareInfluence:
        """Copy with one more attacker of *color*."""
        if color == Color.WHITE:
            return SquareInfluence(self.white + 1, self.black)
        return SquareInfluence(self.white, self.black + 1)


NO_INFLUENCE = SquareInfluence()

InfluenceMap: TypeAlias = dict[Square, SquareInfluence]


def compute_influence(pieces: Iterable[PieceObservation]) -> InfluenceMap:
    """Fold every piece's attacked squares into one influence map.

    Squares nobody reaches are left out. An observation standing on a
    malformed square is skipped; the rest of the board is still counted.
    """
    snapshot = tuple(pieces)
    influence: InfluenceMap = {}

    for piece in snapshot:
        try:
            targets = attacks_from(piece.piece_type, piece.square, piece.color, snapshot)
        except ParseError as exc:
            _LOGGER.warning("Skipping observation %r: %s", piece, exc)
            continue
        for sq in targets:
            influence[sq] = influence.get(sq, NO_INFLUENCE).with_attacker(piece.color)

    return influence


def influence_at(influence: InfluenceMap, square: Square) -> SquareInfluence:
    """Counts for *square*; a missing entry reads as (0, 0)."""
    return influence.get(square, NO_INFLUENCE)
