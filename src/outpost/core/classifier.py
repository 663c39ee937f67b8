"""Map per-square attacker counts to a display shade."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from outpost.core.influence import SquareInfluence

MAX_INTENSITY = 0.8
INTENSITY_STEP = 5  # attackers for full (uncapped) intensity


class Dominance(Enum):
    """Which side controls a square."""

    NONE = "none"
    WHITE = "white"
    BLACK = "black"
    CONTESTED = "contested"


@dataclass(frozen=True, slots=True)
class Shade:
    dominance: Dominance
    intensity: float  # 0.0 – MAX_INTENSITY

    @property
    def visible(self) -> bool:
        return self.dominance is not Dominance.NONE


_RGB: dict[Dominance, tuple[int, int, int]] = {
    Dominance.WHITE: (0, 0, 255),  # blue
    Dominance.BLACK: (255, 0, 0),  # red
    Dominance.CONTESTED: (128, 0, 128),  # purple
}


def classify(influence: SquareInfluence) -> Shade:
    """Dominant side and a saturating intensity for *influence*."""
    white, black = influence.white, influence.black
    intensity = min(max(white, black) / INTENSITY_STEP, MAX_INTENSITY)

    if white > black:
        return Shade(Dominance.WHITE, intensity)
    if black > white:
        return Shade(Dominance.BLACK, intensity)
    if white > 0:
        return Shade(Dominance.CONTESTED, intensity)
    return Shade(Dominance.NONE, 0.0)


def rgba(shade: Shade) -> tuple[int, int, int, float] | None:
    """RGBA tuple for *shade*, or ``None`` for a transparent square."""
    rgb = _RGB.get(shade.dominance)
    if rgb is None:
        return None
    return (*rgb, shade.intensity)
