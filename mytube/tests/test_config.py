"""Tests for settings and logging helpers."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from mytube.core.config import Settings
from mytube.core.log import PerfSwitch, PerfTimer


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MYTUBE_LOG_LEVEL", "debug")
    monkeypatch.setenv("MYTUBE_SEED_CATALOG", "false")
    monkeypatch.setenv("MYTUBE_BENCHMARK_QUERY", "loops")

    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.seed_catalog is False
    assert settings.benchmark_query == "loops"


def test_settings_reject_unknown_level() -> None:
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_perf_switch_toggle() -> None:
    switch = PerfSwitch()
    assert switch.toggle() is True
    assert switch.toggle() is False


def test_perf_timer_logs_when_enabled(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="mytube.perf"):
        with PerfTimer("unit op", enabled=True) as timer:
            pass
        with PerfTimer("quiet op", enabled=False):
            pass

    assert timer.elapsed_us is not None and timer.elapsed_us >= 0
    assert "unit op:" in caplog.text
    assert "quiet op" not in caplog.text
