"""UI package."""

from .timer_widget import (
    TimerWidget,
    PHASE_LABELS,
    format_clock,
    format_money,
    format_wage,
)
from .icons import make_timer_icon, make_timer_pixmap
from .styles import build_stylesheet

__all__ = [
    "TimerWidget",
    "PHASE_LABELS",
    "format_clock",
    "format_money",
    "format_wage",
    "make_timer_icon",
    "make_timer_pixmap",
    "build_stylesheet",
]
