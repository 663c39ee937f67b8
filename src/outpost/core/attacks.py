"""Pseudo-legal attack generation for single pieces.

Influence is a superset of legal attacks: no check, pin or turn awareness.
Only piece shape, the board edge, and blocking by occupancy matter.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection

from outpost.core.enums import Color, PieceType
from outpost.core.occupancy import is_occupied
from outpost.core.piece import PieceObservation
from outpost.core.types import SQUARES, Square, coords_to_square, square_to_coords

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}

Pieces = Collection[PieceObservation]


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, frozenset[Square]]:
    targets: dict[Square, frozenset[Square]] = {}
    for sq in SQUARES:
        file_idx, rank_idx = square_to_coords(sq)
        moves = (coords_to_square(file_idx + df, rank_idx + dr) for df, dr in offsets)
        targets[sq] = frozenset(m for m in moves if m is not None)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in SQUARES:
        file_idx, rank_idx = square_to_coords(sq)
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            ray: list[Square] = []
            step = coords_to_square(file_idx + df, rank_idx + dr)
            while step is not None:
                ray.append(step)
                af, ar = square_to_coords(step)
                step = coords_to_square(af + df, ar + dr)
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Piece-specific generators ---------------------------------------------


def _pawn(sq: Square, color: Color, pieces: Pieces) -> frozenset[Square]:
    # Forward squares count as influenced even when blocked.
    file_idx, rank_idx = square_to_coords(sq)
    direction = _PAWN_DIRECTION[color]
    ahead = rank_idx + direction

    targets: list[Square | None] = [
        coords_to_square(file_idx, ahead),
        coords_to_square(file_idx - 1, ahead),
        coords_to_square(file_idx + 1, ahead),
    ]
    if rank_idx == _PAWN_START_RANK[color]:
        targets.append(coords_to_square(file_idx, rank_idx + 2 * direction))
    return frozenset(t for t in targets if t is not None)


def _knight(sq: Square, color: Color, pieces: Pieces) -> frozenset[Square]:
    return _KNIGHT_TARGETS[sq]


def _king(sq: Square, color: Color, pieces: Pieces) -> frozenset[Square]:
    return _KING_TARGETS[sq]


def _sliding(
    rays: tuple[tuple[Square, ...], ...], pieces: Pieces
) -> frozenset[Square]:
    targets: set[Square] = set()
    for ray in rays:
        for to_sq in ray:
            targets.add(to_sq)
            if is_occupied(to_sq, pieces):
                break
    return frozenset(targets)


def _bishop(sq: Square, color: Color, pieces: Pieces) -> frozenset[Square]:
    return _sliding(_BISHOP_RAYS[sq], pieces)


def _rook(sq: Square, color: Color, pieces: Pieces) -> frozenset[Square]:
    return _sliding(_ROOK_RAYS[sq], pieces)


def _queen(sq: Square, color: Color, pieces: Pieces) -> frozenset[Square]:
    return _sliding(_QUEEN_RAYS[sq], pieces)


_GENERATORS: dict[PieceType, Callable[[Square, Color, Pieces], frozenset[Square]]] = {
    PieceType.PAWN: _pawn,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _bishop,
    PieceType.ROOK: _rook,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}

_missing = set(PieceType) - _GENERATORS.keys()
if _missing:
    raise RuntimeError(f"No attack generator for {sorted(_missing)}")


# -- Public API -------------------------------------------------------------


def attacks_from(
    piece_type: PieceType | str,
    from_square: Square,
    color: Color,
    pieces: Pieces,
) -> frozenset[Square]:
    """Squares a *color* piece of *piece_type* on *from_square* influences.

    *pieces* is the full snapshot; only sliding pieces look at it.
    Raises :class:`~outpost.core.types.ParseError` for a malformed
    *from_square*. Unknown piece kinds influence nothing.
    """
    square_to_coords(from_square)

    if isinstance(piece_type, PieceType):
        ptype = piece_type
    else:
        try:
            ptype = PieceType.from_token(piece_type)
        except ValueError:
            _LOGGER.debug("No attack pattern for piece kind %r", piece_type)
            return frozenset()

    return _GENERATORS[ptype](from_square, color, pieces)
