"""Application settings and how they are applied to the board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from outpost.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from outpost.ui.board.board_scene import BoardScene
    from outpost.ui.refresh import RefreshScheduler


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    flipped: bool = False

    # Overlay
    show_overlay: bool = True
    refresh_delay_ms: int = 100


def apply_settings(
    settings: AppSettings,
    scene: BoardScene,
    scheduler: RefreshScheduler | None = None,
) -> None:
    scene.set_theme(BoardTheme.named(settings.board_theme))
    scene.set_show_coordinates(settings.show_coordinates)
    scene.set_show_overlay(settings.show_overlay)
    if scene.is_flipped() != settings.flipped:
        scene.set_flipped(settings.flipped)

    if scheduler is not None:
        scheduler.set_delay(settings.refresh_delay_ms)
