"""Board reader boundary: turn rendered pieces into observations.

Externally rendered boards (chessground-style markup) position each piece
with an inline ``transform: translate(Xpx, Ypx)`` and name it through a
class such as ``"white knight"``. Anything that cannot be interpreted is
skipped so one stale element never blanks the whole overlay.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

from outpost.core.enums import Color
from outpost.core.piece import PieceObservation
from outpost.core.types import Square, coords_to_square

_LOGGER = logging.getLogger(__name__)

_TRANSLATE_RE = re.compile(r"translate\(([\d.-]+)px,\s*([\d.-]+)px\)")


@dataclass(frozen=True, slots=True)
class RenderedPiece:
    """A piece element as scraped from markup."""

    class_name: str
    style: str


def square_from_transform(
    style: str,
    square_size: float,
    *,
    orientation: Color = Color.WHITE,
) -> Square | None:
    """Square under the top-left corner of a translated piece element.

    Returns ``None`` when *style* has no translate transform or the
    position falls outside the board.
    """
    match = _TRANSLATE_RE.search(style or "")
    if match is None or square_size <= 0:
        return None
    try:
        x = float(match.group(1))
        y = float(match.group(2))
    except ValueError:
        return None

    col = math.floor(x / square_size)
    row = math.floor(y / square_size)
    if orientation == Color.WHITE:
        return coords_to_square(col, 7 - row)
    return coords_to_square(7 - col, row)


def read_pieces(
    rendered: Iterable[RenderedPiece],
    square_size: float,
    *,
    orientation: Color = Color.WHITE,
) -> list[PieceObservation]:
    """Convert rendered piece elements into a snapshot."""
    pieces: list[PieceObservation] = []
    for element in rendered:
        square = square_from_transform(
            element.style, square_size, orientation=orientation
        )
        if square is None:
            _LOGGER.debug("No board square for element %r", element)
            continue
        try:
            pieces.append(PieceObservation.from_class_name(element.class_name, square))
        except ValueError as exc:
            _LOGGER.debug("Ignoring element %r: %s", element, exc)
    return pieces


def observations_from_records(
    records: Iterable[tuple[str, str, str]],
) -> list[PieceObservation]:
    """Validate ``(color, piece_type, square)`` token triples.

    Malformed triples are logged and dropped.
    """
    pieces: list[PieceObservation] = []
    for record in records:
        try:
            color, piece_type, square = record
            pieces.append(PieceObservation.from_tokens(color, piece_type, square))
        except (TypeError, ValueError) as exc:
            _LOGGER.warning("Skipping malformed observation %r: %s", record, exc)
    return pieces
