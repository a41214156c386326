"""The single timer card.

Layout (top → bottom):
    - Stopwatch icon
    - Phase heading ("Work Time" / "Break Time")
    - MM:SS clock
    - Money earned + hourly wage input
    - Start/Stop and Reset buttons
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QLineEdit,
)

from ..timer.engine import EngineSnapshot, Phase, TimerEngine
from .icons import make_timer_pixmap
from .styles import PHASE_COLORS


PHASE_LABELS: dict[Phase, str] = {
    Phase.WORKING: "Work Time",
    Phase.BREAK:   "Break Time",
}


def format_clock(seconds: int) -> str:
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{secs:02d}"


def format_money(amount: float) -> str:
    return f"${amount:.2f}"


def format_wage(wage: float) -> str:
    """Wage as it goes back into the input field (``20`` not ``20.0``)."""
    return f"{wage:g}"


class TimerWidget(QWidget):
    """Renders an engine snapshot and forwards button/wage input to it."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._shown_phase: Phase | None = None
        self._build_ui()
        self._connect_signals()
        self._render(engine.snapshot())

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 24, 32, 28)
        layout.setSpacing(12)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._icon = QLabel(self)
        self._icon.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._icon)

        self._phase_label = QLabel(self)
        self._phase_label.setObjectName("phaseLabel")
        self._phase_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._phase_label)

        self._clock_label = QLabel(self)
        self._clock_label.setObjectName("clockLabel")
        self._clock_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._clock_label)

        # ── earnings ─────────────────────────────────────────────────
        self._money_label = QLabel(self)
        self._money_label.setObjectName("moneyLabel")
        layout.addWidget(self._money_label)

        wage_row = QHBoxLayout()
        wage_row.setSpacing(8)
        wage_caption = QLabel("Hourly Wage:", self)
        wage_caption.setObjectName("wageLabel")
        self._wage_input = QLineEdit(format_wage(self._engine.hourly_wage), self)
        self._wage_input.setObjectName("wageInput")
        self._wage_input.setFixedWidth(100)
        wage_row.addWidget(wage_caption)
        wage_row.addWidget(self._wage_input)
        wage_row.addStretch(1)
        layout.addLayout(wage_row)

        # ── controls ─────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(16)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_stop_btn = QPushButton("Start", self)
        self._start_stop_btn.setObjectName("startButton")

        self._reset_btn = QPushButton("Reset", self)
        self._reset_btn.setObjectName("resetButton")

        # Space is the window's start/stop key, not "press focused button"
        for btn in (self._start_stop_btn, self._reset_btn):
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)

        btn_row.addWidget(self._start_stop_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_stop_btn.clicked.connect(self._engine.toggle_running)
        self._reset_btn.clicked.connect(self._on_reset)
        self._wage_input.textEdited.connect(self._engine.set_hourly_wage)

        self._engine.changed.connect(self._render)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_reset(self) -> None:
        self._engine.reset()
        # drop half-typed junk like "abc" that was coerced to 0
        self._wage_input.setText(format_wage(self._engine.hourly_wage))

    def _render(self, snapshot: EngineSnapshot) -> None:
        if snapshot.phase is not self._shown_phase:
            self._shown_phase = snapshot.phase
            self._phase_label.setText(PHASE_LABELS[snapshot.phase])
            self._icon.setPixmap(
                make_timer_pixmap(48, PHASE_COLORS[snapshot.phase])
            )

        self._clock_label.setText(format_clock(snapshot.remaining_seconds))
        self._money_label.setText(
            f"Money Earned: {format_money(snapshot.money_earned)}"
        )
        self._set_running_look(snapshot.is_running)

    def _set_running_look(self, running: bool) -> None:
        name = "stopButton" if running else "startButton"
        if self._start_stop_btn.objectName() == name:
            return
        self._start_stop_btn.setObjectName(name)
        self._start_stop_btn.setText("Stop" if running else "Start")
        # object-name selectors only re-apply after a re-polish
        style = self._start_stop_btn.style()
        style.unpolish(self._start_stop_btn)
        style.polish(self._start_stop_btn)

    # ── accessors (tests, keyboard shortcuts) ─────────────────────────────

    @property
    def wage_input(self) -> QLineEdit:
        return self._wage_input
