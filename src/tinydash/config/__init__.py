"""Configuration layer — settings discovery, logging, telemetry switch.

Nothing here runs on import. Utilities only consult settings that an
explicit :func:`configure` call installed (see :func:`active_settings`).
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import structlog

from tinydash.config.logging import configure_logging
from tinydash.config.settings import TinydashSettings
from tinydash.telemetry import disable_telemetry, enable_telemetry

_lock = threading.Lock()
_active: TinydashSettings | None = None


def active_settings() -> TinydashSettings | None:
    """Settings installed by :func:`configure`, or None. Never touches disk."""
    with _lock:
        return _active


def get_settings() -> TinydashSettings:
    """Return the active settings, loading them from the environment once."""
    global _active
    with _lock:
        if _active is None:
            _active = TinydashSettings.load()
        return _active


def configure(
    *,
    config_path: str | Path | None = None,
    start: Path | None = None,
    **overrides: Any,
) -> TinydashSettings:
    """Load settings, apply logging and telemetry, and make them active.

    *overrides* are section dicts, e.g.
    ``configure(equality={"ordered_keys": False})``.
    """
    global _active
    settings = TinydashSettings.load(config_path=config_path, start=start, **overrides)
    configure_logging(
        verbose=settings.logging.verbose,
        log_json=settings.logging.log_json,
        telemetry=settings.telemetry.enabled,
    )
    if settings.telemetry.enabled:
        enable_telemetry()
    else:
        disable_telemetry()
    with _lock:
        _active = settings
    log = structlog.get_logger("tinydash.config")
    log.debug("configured", config_path=str(settings.config_path) if settings.config_path else None)
    return settings


def reset_settings() -> None:
    """Forget the active settings so the next lookup reloads them."""
    global _active
    with _lock:
        _active = None


__all__ = [
    "TinydashSettings",
    "active_settings",
    "configure",
    "configure_logging",
    "get_settings",
    "reset_settings",
]
