"""Shared pytest fixtures for PayTimer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from paytimer.timer.engine import TimerEngine

from helpers import ManualScheduler


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def engine(qapp, scheduler):
    """Default 25/5 engine at $20/h, driven by hand."""
    return TimerEngine(scheduler=scheduler)


@pytest.fixture
def short_engine(qapp, scheduler):
    """1-minute work, 1-minute break, $36/h (exactly 1 cent per second)."""
    return TimerEngine(1, 1, 36.0, scheduler=scheduler)
