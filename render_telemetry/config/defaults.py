"""Built-in defaults and environment variable names for render telemetry."""

DEFAULT_ENABLED = True
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SINK = "noop"

ENV_PREFIX = "RENDER_TELEMETRY_"
CONFIG_FILE_ENV = "RENDER_TELEMETRY_CONFIG_FILE"

# Settings file section holding tracker options.
CONFIG_SECTION = "tracker"

ENV_FIELD_MAP = {
    "enabled": "ENABLED",
    "log_level": "LOG_LEVEL",
    "sink": "SINK",
}
