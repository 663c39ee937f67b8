"""BoardScene: QGraphicsScene that draws the board, pieces and influence."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from outpost.core.classifier import classify
from outpost.core.enums import Color
from outpost.core.influence import InfluenceMap, compute_influence
from outpost.core.piece import PieceObservation
from outpost.core.types import SQUARES, Square, coords_to_square, square_to_coords
from outpost.ui.styles.theme import BoardTheme, InfluencePalette

_LOGGER = logging.getLogger(__name__)


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, piece glyphs and the influence overlay.

    The overlay is rebuilt from scratch on every snapshot: one translucent
    rectangle per influenced square, coloured by the dominant side.

    Signals:
        square_hovered(str): Label of the square under the cursor, or ""
            when the cursor leaves the board.
    """

    square_hovered = pyqtSignal(str)

    TILE = 80  # px per square

    _Z_SQUARE = 0.0
    _Z_COORD = 0.3
    _Z_OVERLAY = 0.5
    _Z_PIECE = 1.0

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._palette = InfluencePalette.default()
        self._pieces: tuple[PieceObservation, ...] = ()
        self._influence: InfluenceMap = {}
        self._flipped = False
        self._show_coordinates = True
        self._show_overlay = True
        self._hovered_sq: Square | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._overlay_items: dict[Square, QGraphicsRectItem] = {}
        self._piece_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_snapshot(self, pieces: Iterable[PieceObservation]) -> None:
        """Show *pieces* and recompute the overlay for them."""
        self._pieces = tuple(pieces)
        self._influence = compute_influence(self._pieces)
        _LOGGER.debug(
            "Snapshot of %d pieces influences %d squares",
            len(self._pieces),
            len(self._influence),
        )
        self._sync_pieces()
        self._sync_overlay()

    @property
    def influence_map(self) -> InfluenceMap:
        return self._influence

    @property
    def pieces(self) -> tuple[PieceObservation, ...]:
        return self._pieces

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_palette(self, palette: InfluencePalette) -> None:
        self._palette = palette
        self._sync_overlay()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_overlay(self, visible: bool) -> None:
        """Show or hide the influence overlay."""
        self._show_overlay = visible
        for item in self._overlay_items.values():
            item.setVisible(visible)

    def clear_hover(self) -> None:
        """Forget the hovered square and emit "" if there was one."""
        if self._hovered_sq is not None:
            self._hovered_sq = None
            self.square_hovered.emit("")

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._draw_board()
        self._sync_pieces()
        self._sync_overlay()

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))

        for sq in SQUARES:
            f, r = square_to_coords(sq)
            vf, vr = self._visual_coords(f, r)
            is_dark = (f + r) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(self._Z_SQUARE)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_dark else self._theme.coord_light

            # Rank numbers (left edge)
            if f == (7 if self._flipped else 0):
                self._add_coord(str(r + 1), text_color, font, vf * t + 2, vr * t + 1)

            # File letters (bottom edge)
            if r == (7 if self._flipped else 0):
                self._add_coord(sq[0], text_color, font, vf * t + t - 12, vr * t + t - 16)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, color: QColor, font: QFont, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(self._Z_COORD)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the current snapshot."""
        for item in self._piece_items:
            self.removeItem(item)
        self._piece_items.clear()

        t = self.TILE
        font = QFont("Adwaita Sans", int(t * 0.6))
        for piece in self._pieces:
            try:
                f, r = square_to_coords(piece.square)
            except ValueError:
                continue
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            fill = (
                self._theme.piece_white
                if piece.color == Color.WHITE
                else self._theme.piece_black
            )
            item.setBrush(QBrush(fill))
            item.setPen(QPen(QColor(0, 0, 0), 1))
            vf, vr = self._visual_coords(f, r)
            bounds = item.boundingRect()
            item.setPos(
                vf * t + (t - bounds.width()) / 2,
                vr * t + (t - bounds.height()) / 2,
            )
            item.setZValue(self._Z_PIECE)
            self.addItem(item)
            self._piece_items.append(item)

    # ── Influence overlay ────────────────────────────────────────────────

    def _sync_overlay(self) -> None:
        """Clear the overlay and paint one rectangle per influenced square."""
        for item in self._overlay_items.values():
            self.removeItem(item)
        self._overlay_items.clear()

        t = self.TILE
        for sq, influence in self._influence.items():
            color = self._palette.color_for(classify(influence))
            if color is None:
                continue
            f, r = square_to_coords(sq)
            vf, vr = self._visual_coords(f, r)
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(self._Z_OVERLAY)
            rect.setVisible(self._show_overlay)
            rect.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
            self.addItem(rect)
            self._overlay_items[sq] = rect

    # ── Mouse interaction ────────────────────────────────────────────────

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None:
            sq = self._pos_to_square(event.scenePos())
            if sq != self._hovered_sq:
                self._hovered_sq = sq
                self.square_hovered.emit(sq or "")
        super().mouseMoveEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Convert board file/rank to visual column/row."""
        if self._flipped:
            return 7 - file, rank
        return file, 7 - rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            return coords_to_square(7 - col, row)
        return coords_to_square(col, 7 - row)
