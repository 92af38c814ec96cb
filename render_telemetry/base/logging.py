"""Base structured logging utilities for render telemetry.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid ad-hoc logger setup in the tracker and sinks.

All package loggers are children of the shared ``render_telemetry`` logger,
which owns a single stderr handler. The level can be overridden with the
``RENDER_TELEMETRY_LOG_LEVEL`` environment variable.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "render_telemetry"
LOG_LEVEL_ENV = "RENDER_TELEMETRY_LOG_LEVEL"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_BASE_LOGGER_ATTR = "_render_telemetry_initialized"
_CONSOLE_HANDLER_ATTR = "_render_telemetry_console_handler"
_FILE_HANDLER_ATTR = "_render_telemetry_file_handler"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level name into its integer constant.

    Accepts DEBUG, INFO, WARN/WARNING, ERROR, CRITICAL case-insensitively and
    falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``render_telemetry`` logger."""

    logger = logging.getLogger(BASE_LOGGER_NAME)
    env_level = os.getenv(LOG_LEVEL_ENV)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        # Once initialized, only the env var may change the level here;
        # configure_logger() owns runtime adjustments.
        if env_level:
            logger.setLevel(_parse_level(env_level, default=logger.level))
        for existing in logger.handlers:
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            existing.setLevel(logger.level)
            # Follow stderr replacement (pytest capture, daemonized runners).
            stream = getattr(existing, "stream", None)
            if stream is not sys.stderr:
                if stream is None or getattr(stream, "closed", False):
                    existing.stream = sys.stderr
                else:
                    existing.setStream(sys.stderr)
            if json_mode != isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(_make_formatter(json_mode))
        return logger

    desired_level = _parse_level(env_level, default=level)
    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return a package logger wired to the shared base handler.

    Child loggers carry no handlers of their own and propagate to the base
    logger, so each record is written exactly once.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired level, numeric or by name. ``None`` keeps the current level.
    file_path: Optional[str]
        When provided, a rotating file handler writing to ``file_path`` is
        attached (or reused if it already points there). When ``None``, any
        file handler previously attached by this function is removed.
    json_mode: bool
        JSON formatter (default) or plain text formatter for added handlers.

    Returns
    -------
    logging.Logger
        The shared base logger.
    """
    logger = get_logger(BASE_LOGGER_NAME, json_mode=json_mode)

    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    abs_path = os.path.abspath(os.path.expanduser(file_path)) if file_path else None

    existing: Optional[logging.FileHandler] = None
    for h in managed:
        if abs_path is not None and getattr(h, "baseFilename", None) == abs_path:
            existing = h
            continue
        logger.removeHandler(h)
        with contextlib.suppress(OSError):
            h.close()

    if abs_path is None:
        return logger

    if existing is None:
        os.makedirs(os.path.dirname(abs_path), exist_ok=True)
        fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        logger.addHandler(fh)
        existing = fh
    existing.setFormatter(_make_formatter(json_mode))
    existing.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON payload.

    Keys whose values are ``None`` are dropped. Nothing is serialized when
    ``level`` is disabled for ``logger``.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
