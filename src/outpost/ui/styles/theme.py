"""Visual theme constants and QSS styles for Outpost."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from outpost.core.classifier import Dominance, Shade


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    piece_white: QColor
    piece_black: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(224, 226, 231),
            dark_square=QColor(101, 110, 122),
            coord_light=QColor(101, 110, 122),
            coord_dark=QColor(224, 226, 231),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by settings name; unknown names fall back to Classic."""
        factories = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Slate": cls.slate,
        }
        return factories.get(name, cls.default)()


THEME_NAMES: tuple[str, ...] = ("Classic", "Blue", "Slate")


@dataclass(frozen=True)
class InfluencePalette:
    """Overlay colours per dominant side; alpha comes from the shade."""

    white: QColor
    black: QColor
    contested: QColor

    @classmethod
    def default(cls) -> InfluencePalette:
        return cls(
            white=QColor(0, 0, 255),  # blue
            black=QColor(255, 0, 0),  # red
            contested=QColor(128, 0, 128),  # purple
        )

    def color_for(self, shade: Shade) -> QColor | None:
        """Overlay colour for *shade*, or ``None`` when nothing is drawn."""
        base = {
            Dominance.WHITE: self.white,
            Dominance.BLACK: self.black,
            Dominance.CONTESTED: self.contested,
        }.get(shade.dominance)
        if base is None:
            return None
        color = QColor(base)
        color.setAlphaF(shade.intensity)
        return color


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QLineEdit {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    border-radius: 4px;
    padding: 4px 6px;
    font-family: "Consolas", monospace;
    font-size: 13px;
}

QCheckBox {
    color: #e0e0e0;
}

QStatusBar {
    color: #e0e0e0;
}
"""
