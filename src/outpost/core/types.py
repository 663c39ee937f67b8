"""Square type alias and coordinate helpers.

Squares are carried around as algebraic labels ('a1'..'h8'); arithmetic
happens on ``(file, rank)`` pairs with both indexes in 0–7:

    a1 = (0, 0), b1 = (1, 0), ..., h1 = (7, 0)
    ...
    a8 = (0, 7), ..., h8 = (7, 7)
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = str  # 'a1'–'h8'
Coords: TypeAlias = tuple[int, int]  # (file, rank)

_FILES = "abcdefgh"
_RANKS = "12345678"


class ParseError(ValueError):
    """Raised when a square label cannot be parsed."""


def square_to_coords(square: str) -> Coords:
    """Parse square name into (file, rank), e.g. 'e4' → (4, 3)."""
    if (
        not isinstance(square, str)
        or len(square) != 2
        or square[0] not in _FILES
        or square[1] not in _RANKS
    ):
        raise ParseError(f"Invalid square name: {square!r}")
    return _FILES.index(square[0]), _RANKS.index(square[1])


def coords_to_square(file: int, rank: int) -> Square | None:
    """Square name for (file, rank), or ``None`` when off the board."""
    if not (0 <= file < 8 and 0 <= rank < 8):
        return None
    return _FILES[file] + _RANKS[rank]


def is_valid_square(square: str) -> bool:
    """Check whether *square* is a well-formed label."""
    try:
        square_to_coords(square)
    except ParseError:
        return False
    return True


# ── All squares, a1..h1 then a2..h2 and so on ────────────────────────────────

SQUARES: tuple[Square, ...] = tuple(
    f + r for r in _RANKS for f in _FILES
)
