"""Module-level helper wiring: default tracker, default sink, settings."""
from __future__ import annotations

import json
import logging

from render_telemetry import (
    InMemoryMeasurementCollector,
    LoggingMeasurementSink,
    MeasurementName,
    NoOpMeasurementSink,
    get_default_sink,
    measure_data_render_delay,
    reset_render_delay_cache,
    set_default_sink,
)
from render_telemetry.measurement import get_default_tracker, get_process_cache


def test_helper_reports_to_the_installed_default_sink(recording_sink, frame_with):
    set_default_sink(recording_sink)
    time_values = [100, 200, 300]
    frame = frame_with(time_values)

    measure_data_render_delay(frame, frame)
    time_values.append(500)
    samples = measure_data_render_delay(frame, frame)

    assert len(samples) == 1  # nosec B101
    assert recording_sink.calls[0][0] == MeasurementName.DATA_RENDER_DELAY.value  # nosec B101
    assert samples[0].timestamp == 500  # nosec B101


def test_default_sink_follows_settings(monkeypatch):
    monkeypatch.setenv("RENDER_TELEMETRY_SINK", "memory")
    assert isinstance(get_default_sink(), InMemoryMeasurementCollector)  # nosec B101

    set_default_sink(None)
    monkeypatch.setenv("RENDER_TELEMETRY_SINK", "logging")
    assert isinstance(get_default_sink(), LoggingMeasurementSink)  # nosec B101

    set_default_sink(None)
    monkeypatch.delenv("RENDER_TELEMETRY_SINK")
    assert isinstance(get_default_sink(), NoOpMeasurementSink)  # nosec B101


def test_memory_sink_aggregates_helper_measurements(monkeypatch, frame_with):
    monkeypatch.setenv("RENDER_TELEMETRY_SINK", "memory")
    measure_data_render_delay(frame_with([200, 400, 600]), None)

    collector = get_default_sink()
    snap = collector.snapshot(MeasurementName.DATA_RENDER_DELAY)
    assert snap.count == 3  # nosec B101
    # One clock reading per render: spread equals the timestamp spread.
    assert snap.max - snap.min == 400  # nosec B101


def test_disabled_via_env_emits_nothing(monkeypatch, recording_sink, frame_with):
    monkeypatch.setenv("RENDER_TELEMETRY_ENABLED", "false")
    set_default_sink(recording_sink)

    assert measure_data_render_delay(frame_with([100]), None) == []  # nosec B101
    assert recording_sink.calls == []  # nosec B101


def test_reset_clears_cache_and_default_tracker(frame_with):
    frame = frame_with([100])
    measure_data_render_delay(frame, frame)
    first = get_default_tracker()
    assert len(get_process_cache()) == 1  # nosec B101

    reset_render_delay_cache()

    assert len(get_process_cache()) == 0  # nosec B101
    assert get_default_tracker() is not first  # nosec B101


def test_logging_sink_writes_measurement_event(monkeypatch, capsys, frame_with):
    monkeypatch.setenv("RENDER_TELEMETRY_SINK", "logging")
    measure_data_render_delay(frame_with([100, 250]), frame_with([100]))

    lines = [ln for ln in capsys.readouterr().err.splitlines() if ln.strip()]
    events = [json.loads(ln) for ln in lines if ln.startswith("{")]
    measured = [e for e in events if e.get("event") == "measurement"]
    assert len(measured) == 1  # nosec B101
    assert measured[0]["metric"] == "DataRenderDelay"  # nosec B101
    assert measured[0]["value"] > 0  # nosec B101


def test_file_configured_log_level_reaches_package_logger(monkeypatch, tmp_path, frame_with):
    path = tmp_path / "telemetry.yaml"
    path.write_text("tracker:\n  log_level: debug\n", encoding="utf-8")
    monkeypatch.setenv("RENDER_TELEMETRY_CONFIG_FILE", str(path))

    measure_data_render_delay(frame_with([100]), None)

    assert logging.getLogger("render_telemetry").level == logging.DEBUG  # nosec B101


def test_default_sink_applies_configured_log_level(monkeypatch, tmp_path):
    path = tmp_path / "telemetry.json"
    path.write_text(json.dumps({"tracker": {"log_level": "warning"}}), encoding="utf-8")
    monkeypatch.setenv("RENDER_TELEMETRY_CONFIG_FILE", str(path))

    get_default_sink()

    assert logging.getLogger("render_telemetry").level == logging.WARNING  # nosec B101
