"""Core domain layer: pure influence computation with zero external dependencies.

Quick start::

    from outpost.core import compute_influence, snapshot_from_fen, STARTING_FEN

    influence = compute_influence(snapshot_from_fen(STARTING_FEN))
    print(influence["e3"])  # SquareInfluence(white=3, black=0)
"""

from outpost.core.attacks import attacks_from
from outpost.core.classifier import (
    MAX_INTENSITY,
    Dominance,
    Shade,
    classify,
    rgba,
)
from outpost.core.enums import Color, PieceType
from outpost.core.fen import STARTING_FEN, snapshot_from_fen
from outpost.core.influence import (
    NO_INFLUENCE,
    InfluenceMap,
    SquareInfluence,
    compute_influence,
    influence_at,
)
from outpost.core.occupancy import is_occupied, is_occupied_by_opponent
from outpost.core.piece import PieceObservation
from outpost.core.types import (
    SQUARES,
    ParseError,
    Square,
    coords_to_square,
    is_valid_square,
    square_to_coords,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "SQUARES",
    "ParseError",
    "Square",
    "coords_to_square",
    "is_valid_square",
    "square_to_coords",
    # Snapshot
    "PieceObservation",
    "STARTING_FEN",
    "snapshot_from_fen",
    "is_occupied",
    "is_occupied_by_opponent",
    # Influence
    "attacks_from",
    "compute_influence",
    "influence_at",
    "InfluenceMap",
    "NO_INFLUENCE",
    "SquareInfluence",
    # Classification
    "MAX_INTENSITY",
    "Dominance",
    "Shade",
    "classify",
    "rgba",
]
