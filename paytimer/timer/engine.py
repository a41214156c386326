"""Work/break countdown with a running earnings meter.

Phases
------
WORKING   Work countdown; earnings accrue once per second.
BREAK     Break countdown; earnings are frozen.

Transitions
-----------
WORKING → BREAK    (tick while remaining == 0)
BREAK → WORKING    (tick while remaining == 0)
Any → WORKING      (reset, also stops and zeroes earnings)

The "00:00" value stays on screen for one full tick before the phase
flips.  Ticks only count while running; start/stop never touch the
remaining time.

Two periodic streams drive the engine, both owned by a single
``TickingSession``:

- the countdown stream calls ``tick()``
- the accrual stream calls ``accrual_tick()``, only during WORKING

Accrual reads the wage at the moment it fires, so changing the wage
never restarts a stream and never re-prices money already earned.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from .scheduler import QtScheduler, Scheduler, TickingSession
from .wage import coerce_wage

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class Phase(Enum):
    WORKING = "working"
    BREAK = "break"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_WORK_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5
DEFAULT_HOURLY_WAGE = 20.0

TICK_INTERVAL_MS = 1000
SECONDS_PER_HOUR = 3600


# ── state ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class EngineSnapshot:
    """Everything the UI needs to draw one frame."""

    phase: Phase
    remaining_seconds: int
    money_earned: float
    is_running: bool
    hourly_wage: float


def countdown_step(
    snapshot: EngineSnapshot, work_seconds: int, break_seconds: int
) -> EngineSnapshot:
    """Apply one countdown tick.  Returns *snapshot* itself when idle."""
    if not snapshot.is_running:
        return snapshot
    if snapshot.remaining_seconds > 0:
        return replace(snapshot, remaining_seconds=snapshot.remaining_seconds - 1)
    if snapshot.phase is Phase.WORKING:
        return replace(snapshot, phase=Phase.BREAK, remaining_seconds=break_seconds)
    return replace(snapshot, phase=Phase.WORKING, remaining_seconds=work_seconds)


def accrual_step(snapshot: EngineSnapshot, work_seconds: int) -> EngineSnapshot:
    """Apply one second of pay.  Returns *snapshot* itself when nothing accrues.

    Only seconds the countdown has already consumed are paid, so a full
    work phase pays exactly ``work_seconds`` times whichever stream fires
    first within a second.
    """
    if not snapshot.is_running or snapshot.phase is not Phase.WORKING:
        return snapshot
    if snapshot.remaining_seconds >= work_seconds:
        return snapshot
    # negative wages are shown as typed but never take money away
    per_second = max(0.0, snapshot.hourly_wage) / SECONDS_PER_HOUR
    if per_second == 0.0:
        return snapshot
    return replace(snapshot, money_earned=snapshot.money_earned + per_second)


def _minutes_to_seconds(name: str, minutes: object) -> int:
    """Whole positive minutes only; ``25.0`` is fine, ``0.5`` is not."""
    if (
        isinstance(minutes, bool)
        or not isinstance(minutes, (int, float))
        or not math.isfinite(minutes)
        or minutes != int(minutes)
        or minutes <= 0
    ):
        raise ValueError(
            f"{name} length must be a positive whole number of minutes, "
            f"got {minutes!r}"
        )
    return int(minutes) * 60


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-facing owner of the countdown state.

    Signals
    -------
    changed(snapshot: EngineSnapshot)
        Emitted after every mutation, carrying the new snapshot.
    phase_changed(phase: Phase)
        Emitted when a tick flips WORKING ↔ BREAK.
    running_changed(is_running: bool)
        Emitted when the timer starts or stops (including via reset).
    """

    changed = pyqtSignal(object)
    phase_changed = pyqtSignal(object)
    running_changed = pyqtSignal(bool)

    def __init__(
        self,
        work_minutes: int = DEFAULT_WORK_MINUTES,
        break_minutes: int = DEFAULT_BREAK_MINUTES,
        hourly_wage: float = DEFAULT_HOURLY_WAGE,
        *,
        scheduler: Scheduler | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)

        # ── configuration ─────────────────────────────────────────────
        self._work_seconds: int = _minutes_to_seconds("work", work_minutes)
        self._break_seconds: int = _minutes_to_seconds("break", break_minutes)
        self._scheduler: Scheduler = (
            scheduler if scheduler is not None else QtScheduler(self)
        )

        # ── state ─────────────────────────────────────────────────────
        self._state = EngineSnapshot(
            phase=Phase.WORKING,
            remaining_seconds=self._work_seconds,
            money_earned=0.0,
            is_running=False,
            hourly_wage=coerce_wage(hourly_wage),
        )
        self._session: TickingSession | None = None

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    def snapshot(self) -> EngineSnapshot:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def remaining_seconds(self) -> int:
        return self._state.remaining_seconds

    @property
    def money_earned(self) -> float:
        return self._state.money_earned

    @property
    def hourly_wage(self) -> float:
        return self._state.hourly_wage

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    @property
    def work_seconds(self) -> int:
        return self._work_seconds

    @property
    def break_seconds(self) -> int:
        return self._break_seconds

    @property
    def money_per_second(self) -> float:
        """What the next accrual tick would add during WORKING."""
        return max(0.0, self._state.hourly_wage) / SECONDS_PER_HOUR

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin ticking.  No-op when already running."""
        if self._state.is_running:
            return
        self._replace_session()
        # streams are in place before listeners run; they may stop us again
        self._session.sync_accrual(self._state.phase is Phase.WORKING)
        self._commit(replace(self._state, is_running=True))
        logger.info(
            "timer started (%s, %ds left)",
            self._state.phase.value, self._state.remaining_seconds,
        )

    def stop(self) -> None:
        """Freeze the countdown and the earnings meter.  Idempotent."""
        self._cancel_session()
        if not self._state.is_running:
            return
        self._commit(replace(self._state, is_running=False))
        logger.info("timer stopped")

    def toggle_running(self) -> None:
        if self._state.is_running:
            self.stop()
        else:
            self.start()

    def reset(self) -> None:
        """Back to a stopped, full-length work phase with nothing earned."""
        self._cancel_session()
        self._commit(EngineSnapshot(
            phase=Phase.WORKING,
            remaining_seconds=self._work_seconds,
            money_earned=0.0,
            is_running=False,
            hourly_wage=self._state.hourly_wage,
        ))
        logger.info("timer reset")

    def set_hourly_wage(self, value: object) -> None:
        """Store a new wage; the next accrual tick uses it."""
        wage = coerce_wage(value)
        if wage == self._state.hourly_wage:
            return
        self._commit(replace(self._state, hourly_wage=wage))
        logger.debug("hourly wage set to %.2f", wage)

    # ══════════════════════════════════════════════════════════════════
    #  TICK HANDLERS
    # ══════════════════════════════════════════════════════════════════

    def tick(self) -> None:
        """One countdown second.  Ignored while stopped."""
        before = self._state
        after = countdown_step(before, self._work_seconds, self._break_seconds)
        if after is before:
            return
        self._commit(after)
        if after.phase is not before.phase:
            if self._session is not None:
                self._session.sync_accrual(after.phase is Phase.WORKING)
            logger.info("phase changed: %s → %s", before.phase.value, after.phase.value)
            self.phase_changed.emit(after.phase)

    def accrual_tick(self) -> None:
        """One second of pay.  Ignored unless running in WORKING."""
        before = self._state
        after = accrual_step(before, self._work_seconds)
        if after is before:
            return
        self._commit(after)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _replace_session(self) -> None:
        self._cancel_session()
        self._session = TickingSession(
            self._scheduler,
            TICK_INTERVAL_MS,
            on_tick=self.tick,
            on_accrual=self.accrual_tick,
        )

    def _cancel_session(self) -> None:
        if self._session is not None:
            self._session.cancel()
            self._session = None

    def _commit(self, new_state: EngineSnapshot) -> None:
        was_running = self._state.is_running
        self._state = new_state
        if new_state.is_running != was_running:
            self.running_changed.emit(new_state.is_running)
        self.changed.emit(new_state)
