"""RefreshScheduler: coalesce bursts of board changes into one recompute."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


class RefreshScheduler(QObject):
    """Single pending timer: every ``request()`` re-arms it, one signal fires.

    A burst of change notifications closer together than *delay_ms* yields
    exactly one ``refresh_due`` emission, *delay_ms* after the last one.

    Signals:
        refresh_due(): The burst has settled; recompute now.
    """

    refresh_due = pyqtSignal()

    def __init__(self, delay_ms: int = 100, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)
        self.set_delay(delay_ms)

    @property
    def delay_ms(self) -> int:
        return self._timer.interval()

    def set_delay(self, delay_ms: int) -> None:
        """Change the settle delay; a pending refresh keeps its deadline."""
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")
        self._timer.setInterval(delay_ms)

    def request(self) -> None:
        """Schedule a refresh, replacing any pending one."""
        self._timer.start()

    def cancel(self) -> None:
        """Drop the pending refresh, if any."""
        self._timer.stop()

    def flush(self) -> None:
        """Fire a pending refresh immediately."""
        if self._timer.isActive():
            self._timer.stop()
            self.refresh_due.emit()

    def is_pending(self) -> bool:
        return self._timer.isActive()

    def _on_timeout(self) -> None:
        self.refresh_due.emit()
