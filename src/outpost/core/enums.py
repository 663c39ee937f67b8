"""Core enumerations for piece observations."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def from_token(cls, token: str) -> Color:
        """Parse a color token, e.g. 'white' → Color.WHITE."""
        try:
            return cls[str(token).strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid color token: {token!r}") from None


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def from_token(cls, token: str) -> PieceType:
        """Parse a piece-type token, e.g. 'knight' → PieceType.KNIGHT."""
        try:
            return cls[str(token).strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid piece type token: {token!r}") from None
