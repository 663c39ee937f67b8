"""MainWindow: FEN input, board view and overlay toggles."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from outpost.core.classifier import classify
from outpost.core.fen import STARTING_FEN, snapshot_from_fen
from outpost.core.influence import influence_at
from outpost.ui.board.board_view import BoardView
from outpost.ui.refresh import RefreshScheduler
from outpost.ui.settings import AppSettings, apply_settings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Outpost."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Outpost")
        self.setMinimumSize(480, 560)
        self.resize(720, 800)

        self._settings = settings if settings is not None else AppSettings()
        self._scheduler = RefreshScheduler(self._settings.refresh_delay_ms, self)
        self._last_good_fen: str | None = None

        self._setup_ui()
        self._connect_signals()
        self._apply_settings()

        self.load_fen(STARTING_FEN)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # FEN entry (top)
        self._fen_edit = QLineEdit()
        self._fen_edit.setPlaceholderText("FEN")
        root.addWidget(self._fen_edit)

        # Board (center)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        # Toggles (bottom)
        toggles = QHBoxLayout()
        self._overlay_check = QCheckBox("Show influence")
        self._coords_check = QCheckBox("Coordinates")
        self._flip_check = QCheckBox("Flip board")
        for check in (self._overlay_check, self._coords_check, self._flip_check):
            toggles.addWidget(check)
        toggles.addStretch()
        root.addLayout(toggles)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._status.addWidget(self._status_label)

    def _connect_signals(self) -> None:
        self._fen_edit.textChanged.connect(lambda _text: self._scheduler.request())
        self._scheduler.refresh_due.connect(self._on_refresh_due)
        self._board_view.square_hovered.connect(self._on_square_hovered)
        self._overlay_check.toggled.connect(self._on_overlay_toggled)
        self._coords_check.toggled.connect(self._on_coords_toggled)
        self._flip_check.toggled.connect(self._on_flip_toggled)

    def _apply_settings(self) -> None:
        s = self._settings
        apply_settings(s, self._board_view.board_scene, self._scheduler)
        self._overlay_check.setChecked(s.show_overlay)
        self._coords_check.setChecked(s.show_coordinates)
        self._flip_check.setChecked(s.flipped)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def current_fen(self) -> str | None:
        """Last FEN that parsed and is on the board."""
        return self._last_good_fen

    def load_fen(self, fen: str) -> None:
        """Put *fen* in the entry field and render it without delay."""
        self._fen_edit.blockSignals(True)
        self._fen_edit.setText(fen)
        self._fen_edit.blockSignals(False)
        self._scheduler.cancel()
        self._on_refresh_due()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_refresh_due(self) -> None:
        fen = self._fen_edit.text().strip()
        try:
            pieces = snapshot_from_fen(fen)
        except ValueError as exc:
            _LOGGER.info("Rejected FEN %r: %s", fen, exc)
            self._status_label.setText(str(exc))
            return
        self._last_good_fen = fen
        self._board_view.board_scene.set_snapshot(pieces)
        self._show_summary()

    def _show_summary(self) -> None:
        scene = self._board_view.board_scene
        self._status_label.setText(
            f"{len(scene.pieces)} pieces, {len(scene.influence_map)} squares influenced"
        )

    def _on_square_hovered(self, square: str) -> None:
        if not square:
            self._show_summary()
            return
        counts = influence_at(self._board_view.board_scene.influence_map, square)
        shade = classify(counts)
        self._status_label.setText(
            f"{square}: white {counts.white}, black {counts.black}"
            f" ({shade.dominance.value})"
        )

    def _on_overlay_toggled(self, checked: bool) -> None:
        self._settings.show_overlay = checked
        self._board_view.board_scene.set_show_overlay(checked)

    def _on_coords_toggled(self, checked: bool) -> None:
        self._settings.show_coordinates = checked
        self._board_view.board_scene.set_show_coordinates(checked)

    def _on_flip_toggled(self, checked: bool) -> None:
        self._settings.flipped = checked
        self._board_view.board_scene.set_flipped(checked)
