"""Shared test helpers for PayTimer."""

from __future__ import annotations

from typing import Callable


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class ManualHandle:
    def __init__(self, interval_ms: int, callback: Callable[[], None]):
        self.interval_ms = interval_ms
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        self.active = False


class ManualScheduler:
    """Scheduler that only fires when a test tells it to.

    Handles are fired in the order they were scheduled; cancelled ones
    are skipped.
    """

    def __init__(self):
        self.handles: list[ManualHandle] = []

    def schedule_repeating(self, interval_ms, callback):
        handle = ManualHandle(interval_ms, callback)
        self.handles.append(handle)
        return handle

    @property
    def active_handles(self) -> list[ManualHandle]:
        return [h for h in self.handles if h.active]

    def fire(self, seconds: int = 1) -> None:
        """Deliver *seconds* rounds of every live stream."""
        for _ in range(seconds):
            for handle in list(self.active_handles):
                # a handler earlier in the round may cancel this one
                if handle.active:
                    handle.callback()
