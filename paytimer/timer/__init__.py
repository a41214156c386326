"""Timer package."""

from .engine import (
    TimerEngine,
    EngineSnapshot,
    Phase,
    countdown_step,
    accrual_step,
    DEFAULT_WORK_MINUTES,
    DEFAULT_BREAK_MINUTES,
    DEFAULT_HOURLY_WAGE,
    TICK_INTERVAL_MS,
)
from .scheduler import QtScheduler, Scheduler, TickingSession
from .wage import coerce_wage

__all__ = [
    "TimerEngine",
    "EngineSnapshot",
    "Phase",
    "countdown_step",
    "accrual_step",
    "DEFAULT_WORK_MINUTES",
    "DEFAULT_BREAK_MINUTES",
    "DEFAULT_HOURLY_WAGE",
    "TICK_INTERVAL_MS",
    "QtScheduler",
    "Scheduler",
    "TickingSession",
    "coerce_wage",
]
