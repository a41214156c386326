"""Periodic delivery for the timer engine.

The engine never touches ``QTimer`` directly.  It asks a *scheduler* for a
repeating callback and gets back a handle it can cancel, so tests can swap
in a manual scheduler and inject ticks without waiting on the wall clock.

Ownership
---------
All deliveries that belong to one "running" stretch are bundled in a
``TickingSession``.  The engine holds at most one; starting replaces it
wholesale, stopping or resetting cancels it before returning.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule_repeating(
        self, interval_ms: int, callback: Callable[[], None]
    ) -> TimerHandle: ...


# ── Qt implementation ─────────────────────────────────────────────────────


class QtTimerHandle:
    """A running ``QTimer``; ``cancel()`` stops and releases it."""

    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None


class QtScheduler(QObject):
    """Scheduler backed by the Qt event loop (one ``QTimer`` per handle)."""

    def schedule_repeating(
        self, interval_ms: int, callback: Callable[[], None]
    ) -> QtTimerHandle:
        timer = QTimer(self)
        timer.setInterval(interval_ms)
        timer.timeout.connect(callback)
        timer.start()
        return QtTimerHandle(timer)


# ── session ───────────────────────────────────────────────────────────────


class TickingSession:
    """The countdown stream plus the (work-phase only) accrual stream."""

    def __init__(
        self,
        scheduler: Scheduler,
        interval_ms: int,
        on_tick: Callable[[], None],
        on_accrual: Callable[[], None],
    ) -> None:
        self._scheduler = scheduler
        self._interval_ms = interval_ms
        self._on_accrual = on_accrual
        self._countdown: TimerHandle | None = scheduler.schedule_repeating(
            interval_ms, on_tick
        )
        self._accrual: TimerHandle | None = None

    @property
    def active(self) -> bool:
        return self._countdown is not None

    @property
    def accruing(self) -> bool:
        return self._accrual is not None

    def sync_accrual(self, accruing: bool) -> None:
        """Keep the accrual stream alive exactly while *accruing* is true."""
        if self._countdown is None:
            return
        if accruing and self._accrual is None:
            self._accrual = self._scheduler.schedule_repeating(
                self._interval_ms, self._on_accrual
            )
        elif not accruing and self._accrual is not None:
            self._accrual.cancel()
            self._accrual = None

    def cancel(self) -> None:
        for handle in (self._accrual, self._countdown):
            if handle is not None:
                handle.cancel()
        self._accrual = None
        self._countdown = None
        logger.debug("ticking session cancelled")
