"""Occupancy queries over a snapshot of piece observations."""

from __future__ import annotations

from collections.abc import Iterable

from outpost.core.enums import Color
from outpost.core.piece import PieceObservation
from outpost.core.types import Square


def is_occupied(square: Square, pieces: Iterable[PieceObservation]) -> bool:
    """Is any piece standing on *square*?"""
    return any(piece.square == square for piece in pieces)


def is_occupied_by_opponent(
    square: Square, color: Color, pieces: Iterable[PieceObservation]
) -> bool:
    """Is *square* held by a piece of the side opposing *color*?"""
    return any(
        piece.square == square and piece.color != color for piece in pieces
    )
