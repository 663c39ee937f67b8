"""Piece observation value object."""

from __future__ import annotations

from dataclasses import dataclass

from outpost.core.enums import Color, PieceType
from outpost.core.types import Square, square_to_coords

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class PieceObservation:
    """One piece seen on the board: what it is, whose it is, and where."""

    piece_type: PieceType
    color: Color
    square: Square

    # ── Construction at the reader boundary ─────────────────────────────

    @classmethod
    def from_tokens(cls, color: str, piece_type: str, square: str) -> PieceObservation:
        """Validate raw tokens, e.g. ('white', 'knight', 'g1')."""
        square_to_coords(square)
        return cls(PieceType.from_token(piece_type), Color.from_token(color), square)

    @classmethod
    def from_class_name(cls, class_name: str, square: str) -> PieceObservation:
        """Parse a markup class such as 'white knight' (color first)."""
        parts = class_name.split()
        if len(parts) < 2:
            raise ValueError(f"Invalid piece class: {class_name!r}")
        color, *type_parts = parts
        return cls.from_tokens(color, " ".join(type_parts), square)

    @classmethod
    def from_char(cls, char: str, square: str) -> PieceObservation:
        """Create observation from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        square_to_coords(square)
        return cls(ptype, color, square)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.char}{self.square}"

    @property
    def char(self) -> str:
        """FEN character (uppercase = white, lowercase = black); "?" if unknown."""
        return _FEN_CHARS.get((self.color, self.piece_type), "?")

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞; "?" for an unknown kind."""
        return _UNICODE.get((self.color, self.piece_type), "?")
