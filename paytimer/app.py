"""Main application window for PayTimer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMainWindow

from .settings import Settings
from .timer.engine import EngineSnapshot, TimerEngine
from .ui.icons import make_timer_icon
from .ui.styles import build_stylesheet
from .ui.timer_widget import PHASE_LABELS, TimerWidget, format_clock

logger = logging.getLogger(__name__)

APP_NAME = "PayTimer"


class PayTimerApp(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        settings: Settings | None = None,
        engine: TimerEngine | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or Settings()

        self.setWindowTitle(APP_NAME)
        self.setWindowIcon(make_timer_icon())
        self.resize(self._settings.window_width, self._settings.window_height)
        if self._settings.always_on_top:
            self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)

        # ── engine ────────────────────────────────────────────────────
        self._engine = engine if engine is not None else TimerEngine(
            self._settings.work_minutes,
            self._settings.break_minutes,
            self._settings.hourly_wage,
            parent=self,
        )

        # ── central widget ────────────────────────────────────────────
        self._timer_widget = TimerWidget(self._engine, self)
        self.setCentralWidget(self._timer_widget)
        self.setStyleSheet(build_stylesheet())

        self._engine.changed.connect(self._update_title)
        self._update_title(self._engine.snapshot())

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    # ── title ─────────────────────────────────────────────────────────────

    def _update_title(self, snapshot: EngineSnapshot) -> None:
        if snapshot.is_running:
            self.setWindowTitle(
                f"{format_clock(snapshot.remaining_seconds)} — "
                f"{PHASE_LABELS[snapshot.phase]}"
            )
        else:
            self.setWindowTitle(APP_NAME)

    # ── keyboard ──────────────────────────────────────────────────────────

    def _on_space(self) -> None:
        """Start or stop the timer."""
        # Space belongs to the wage field while it's being edited
        if self._timer_widget.wage_input.hasFocus():
            return
        self._engine.toggle_running()

    def _on_escape(self) -> None:
        self._engine.reset()
        self._timer_widget.wage_input.clearFocus()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Handle Space (start/stop) and Escape (reset) globally."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Stop all periodic deliveries before the window goes away."""
        self._engine.stop()
        logger.debug("window closed")
        event.accept()
