"""Shared pytest fixtures for tinydash tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

from tinydash.config import reset_settings
from tinydash.telemetry import _current_span, _last_span, disable_telemetry


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run each test from an empty directory with no TINYDASH_* env vars.

    Settings discovery walks up from the CWD, so a stray tinydash.toml or
    environment override must not leak into the tests.
    """
    for name in list(os.environ):
        if name.startswith("TINYDASH_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()
    disable_telemetry()
    _current_span.set(None)
    _last_span.set(None)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger and structlog state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    loggers = [logging.getLogger(name) for name in ("tinydash", "tinydash.telemetry")]
    levels = [logger.level for logger in loggers]
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    for logger, level in zip(loggers, levels, strict=True):
        logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a tinydash.toml into the test directory and return its path."""

    def _write(content: str, directory: Path | None = None) -> Path:
        target = (directory or tmp_path) / "tinydash.toml"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    return _write
