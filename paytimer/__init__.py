"""PayTimer: a work/break countdown that shows what the work time is worth."""

__version__ = "0.1.0"
