"""Tests for configure() and the active-settings registry."""

from __future__ import annotations

import logging
from pathlib import Path

from tinydash.config import active_settings, configure, get_settings, reset_settings
from tinydash.telemetry import telemetry_enabled


class TestGetSettings:
    def test_lazily_loads_defaults(self) -> None:
        settings = get_settings()
        assert settings.equality.ordered_keys is True

    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_reads_toml_from_cwd(self, write_config) -> None:
        write_config("[equality]\nordered_keys = false\n")
        assert get_settings().equality.ordered_keys is False

    def test_reset_reloads(self, write_config) -> None:
        first = get_settings()
        write_config("[equality]\nordered_keys = false\n")
        reset_settings()
        second = get_settings()
        assert first is not second
        assert second.equality.ordered_keys is False


class TestConfigure:
    def test_becomes_active(self) -> None:
        settings = configure(equality={"ordered_keys": False})
        assert get_settings() is settings

    def test_applies_logging(self) -> None:
        configure(logging={"verbose": True})
        assert logging.getLogger("tinydash").level == logging.DEBUG

    def test_enables_telemetry(self) -> None:
        configure(telemetry={"enabled": True})
        assert telemetry_enabled() is True

    def test_disables_telemetry(self) -> None:
        configure(telemetry={"enabled": True})
        configure()
        assert telemetry_enabled() is False

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        path.write_text("[telemetry]\nenabled = true\n")
        settings = configure(config_path=path)
        assert settings.config_path == path
        assert telemetry_enabled() is True


class TestActiveSettings:
    def test_none_before_configure(self, write_config) -> None:
        write_config("[equality]\nordered_keys = false\n")
        assert active_settings() is None

    def test_returns_configured(self) -> None:
        settings = configure(equality={"ordered_keys": False})
        assert active_settings() is settings

    def test_does_not_read_broken_config(self, write_config) -> None:
        write_config("[logging\n")
        assert active_settings() is None
