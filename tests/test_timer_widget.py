"""Tests for the timer card and its formatting helpers."""

from __future__ import annotations

import pytest

from paytimer.timer.engine import Phase
from paytimer.ui.timer_widget import (
    TimerWidget, PHASE_LABELS, format_clock, format_money, format_wage,
)


# ═══════════════════════════════════════════════════════════════════════
#  FORMATTING
# ═══════════════════════════════════════════════════════════════════════


class TestFormatting:

    @pytest.mark.parametrize("seconds, text", [
        (1500, "25:00"),
        (300, "05:00"),
        (61, "01:01"),
        (9, "00:09"),
        (0, "00:00"),
        (6000, "100:00"),
    ])
    def test_format_clock(self, seconds, text):
        assert format_clock(seconds) == text

    @pytest.mark.parametrize("amount, text", [
        (0.0, "$0.00"),
        (8.333333, "$8.33"),
        (0.005, "$0.01"),
        (1234.5, "$1234.50"),
    ])
    def test_format_money(self, amount, text):
        assert format_money(amount) == text

    def test_format_wage(self):
        assert format_wage(20.0) == "20"
        assert format_wage(12.5) == "12.5"

    def test_phase_labels(self):
        assert PHASE_LABELS[Phase.WORKING] == "Work Time"
        assert PHASE_LABELS[Phase.BREAK] == "Break Time"


# ═══════════════════════════════════════════════════════════════════════
#  WIDGET
# ═══════════════════════════════════════════════════════════════════════


class TestTimerWidget:

    @pytest.fixture
    def widget(self, engine):
        return TimerWidget(engine)

    def test_initial_render(self, widget):
        assert widget._phase_label.text() == "Work Time"
        assert widget._clock_label.text() == "25:00"
        assert widget._money_label.text() == "Money Earned: $0.00"
        assert widget.wage_input.text() == "20"
        assert widget._start_stop_btn.text() == "Start"
        assert widget._start_stop_btn.objectName() == "startButton"

    def test_start_button_toggles_engine(self, widget, engine):
        widget._start_stop_btn.click()
        assert engine.is_running
        assert widget._start_stop_btn.text() == "Stop"
        assert widget._start_stop_btn.objectName() == "stopButton"

        widget._start_stop_btn.click()
        assert not engine.is_running
        assert widget._start_stop_btn.text() == "Start"

    def test_ticks_update_labels(self, widget, engine, scheduler):
        engine.start()
        scheduler.fire(90)
        assert widget._clock_label.text() == "23:30"
        assert widget._money_label.text() == "Money Earned: $0.50"

    def test_phase_heading_follows_engine(self, short_engine, scheduler):
        widget = TimerWidget(short_engine)
        short_engine.start()
        scheduler.fire(61)
        assert widget._phase_label.text() == "Break Time"
        assert widget._clock_label.text() == "01:00"

    def test_wage_edit_reaches_engine(self, widget, engine):
        widget.wage_input.textEdited.emit("45")
        assert engine.hourly_wage == 45.0

    def test_non_numeric_wage_is_zero(self, widget, engine):
        widget.wage_input.textEdited.emit("abc")
        assert engine.hourly_wage == 0.0

    def test_reset_button(self, widget, engine, scheduler):
        engine.start()
        scheduler.fire(30)
        widget.wage_input.setText("abc")
        widget.wage_input.textEdited.emit("abc")

        widget._reset_btn.click()

        assert not engine.is_running
        assert widget._clock_label.text() == "25:00"
        assert widget._money_label.text() == "Money Earned: $0.00"
        assert widget._start_stop_btn.text() == "Start"
        assert widget.wage_input.text() == "0"
