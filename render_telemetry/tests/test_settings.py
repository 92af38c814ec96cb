"""Settings merge order and validation."""
from __future__ import annotations

import json
import logging

import pytest

from render_telemetry.base.errors import ErrorCode, TelemetryError
from render_telemetry.config import (
    TrackerSettings,
    apply_logging,
    get_tracker_settings,
    reset_settings_cache,
)


def test_defaults():
    s = get_tracker_settings()
    assert s == TrackerSettings(enabled=True, log_level="INFO", sink="noop")  # nosec B101


def test_json_file_then_env_then_overrides(monkeypatch, tmp_path):
    path = tmp_path / "telemetry.json"
    path.write_text(json.dumps({"tracker": {"enabled": False, "sink": "memory", "log_level": "debug"}}), encoding="utf-8")
    monkeypatch.setenv("RENDER_TELEMETRY_CONFIG_FILE", str(path))

    s = get_tracker_settings()
    assert s.enabled is False and s.sink == "memory" and s.log_level == "DEBUG"  # nosec B101

    monkeypatch.setenv("RENDER_TELEMETRY_SINK", "Logging")
    assert get_tracker_settings().sink == "logging"  # nosec B101

    s = get_tracker_settings({"enabled": True, "sink": None})
    assert s.enabled is True and s.sink == "logging"  # nosec B101


def test_yaml_file_is_supported(monkeypatch, tmp_path):
    path = tmp_path / "telemetry.yaml"
    path.write_text("tracker:\n  sink: memory\n  enabled: off\n", encoding="utf-8")
    monkeypatch.setenv("RENDER_TELEMETRY_CONFIG_FILE", str(path))

    s = get_tracker_settings()
    assert s.sink == "memory" and s.enabled is False  # nosec B101


def test_settings_file_is_cached_until_reset(monkeypatch, tmp_path):
    path = tmp_path / "telemetry.json"
    path.write_text(json.dumps({"tracker": {"sink": "memory"}}), encoding="utf-8")
    monkeypatch.setenv("RENDER_TELEMETRY_CONFIG_FILE", str(path))
    assert get_tracker_settings().sink == "memory"  # nosec B101

    path.write_text(json.dumps({"tracker": {"sink": "logging"}}), encoding="utf-8")
    assert get_tracker_settings().sink == "memory"  # nosec B101

    reset_settings_cache()
    assert get_tracker_settings().sink == "logging"  # nosec B101


def test_missing_file_falls_back_to_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("RENDER_TELEMETRY_CONFIG_FILE", str(tmp_path / "absent.json"))
    assert get_tracker_settings().sink == "noop"  # nosec B101


def test_malformed_file_raises_config_error(monkeypatch, tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("tracker: [unclosed\n", encoding="utf-8")
    monkeypatch.setenv("RENDER_TELEMETRY_CONFIG_FILE", str(path))

    with pytest.raises(TelemetryError) as excinfo:
        get_tracker_settings()
    assert excinfo.value.code is ErrorCode.CONFIG  # nosec B101


def test_non_mapping_file_raises_config_error(monkeypatch, tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    monkeypatch.setenv("RENDER_TELEMETRY_CONFIG_FILE", str(path))

    with pytest.raises(TelemetryError) as excinfo:
        get_tracker_settings()
    assert excinfo.value.code is ErrorCode.CONFIG  # nosec B101


@pytest.mark.parametrize(
    "env, value",
    [
        ("RENDER_TELEMETRY_SINK", "prometheus"),
        ("RENDER_TELEMETRY_ENABLED", "sometimes"),
        ("RENDER_TELEMETRY_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_raise_validation_error(monkeypatch, env, value):
    monkeypatch.setenv(env, value)
    with pytest.raises(TelemetryError) as excinfo:
        get_tracker_settings()
    assert excinfo.value.code is ErrorCode.VALIDATION  # nosec B101


def test_apply_logging_sets_package_level():
    logger = apply_logging(TrackerSettings(log_level="warning"))
    assert logger.name == "render_telemetry" and logger.level == logging.WARNING  # nosec B101
    apply_logging(TrackerSettings())
