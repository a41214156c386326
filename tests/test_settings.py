"""Tests for startup settings loading."""

from __future__ import annotations

import json
import logging

import pytest

from paytimer.settings import Settings, load_settings, SETTINGS_PATH


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestSettingsDefaults:
    def test_timer_defaults(self):
        s = Settings()
        assert s.work_minutes == 25
        assert s.break_minutes == 5
        assert s.hourly_wage == 20.0

    def test_window_defaults(self):
        s = Settings()
        assert s.window_width == 420
        assert s.window_height == 520
        assert s.always_on_top is False

    def test_log_level_default(self):
        assert Settings().log_level == "INFO"

    def test_settings_path_location(self):
        assert SETTINGS_PATH.name == "settings.json"
        assert SETTINGS_PATH.parent.name == "PayTimer"


class TestLoadSettings:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "nope.json") == Settings()

    def test_reads_values(self, tmp_path):
        path = _write(tmp_path / "s.json", {
            "work_minutes": 50, "break_minutes": 10, "hourly_wage": 35,
            "always_on_top": True, "log_level": "debug",
        })
        s = load_settings(path)
        assert s.work_minutes == 50
        assert s.break_minutes == 10
        assert s.hourly_wage == 35.0
        assert isinstance(s.hourly_wage, float)
        assert s.always_on_top is True
        assert s.log_level == "DEBUG"

    def test_unknown_keys_ignored(self, tmp_path):
        path = _write(tmp_path / "s.json", {"work_minutes": 30, "theme": "dark"})
        s = load_settings(path)
        assert s.work_minutes == 30

    @pytest.mark.parametrize("key, value", [
        ("work_minutes", 0),
        ("work_minutes", -5),
        ("work_minutes", "25"),
        ("break_minutes", 2.5),
        ("break_minutes", True),
        ("hourly_wage", "lots"),
        ("log_level", "LOUD"),
        ("always_on_top", "yes"),
    ])
    def test_bad_value_falls_back_individually(self, tmp_path, caplog, key, value):
        path = _write(tmp_path / "s.json", {key: value, "window_width": 600})
        with caplog.at_level(logging.WARNING, logger="paytimer.settings"):
            s = load_settings(path)
        assert getattr(s, key) == getattr(Settings(), key)
        assert s.window_width == 600
        assert key in caplog.text

    def test_malformed_json(self, tmp_path, caplog):
        path = tmp_path / "s.json"
        path.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="paytimer.settings"):
            assert load_settings(path) == Settings()
        assert "unreadable" in caplog.text

    def test_non_object_json(self, tmp_path):
        path = _write(tmp_path / "s.json", [1, 2, 3])
        assert load_settings(path) == Settings()

    def test_default_path_used(self, tmp_path, monkeypatch):
        path = _write(tmp_path / "settings.json", {"hourly_wage": 12.5})
        monkeypatch.setattr("paytimer.settings.SETTINGS_PATH", path)
        assert load_settings().hourly_wage == 12.5
