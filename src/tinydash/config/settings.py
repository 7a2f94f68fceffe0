"""Unified settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — overrides passed to ``configure()``
  2. Env vars     — ``TINYDASH_*`` prefix, ``__`` for nested fields
  3. TOML file    — ``tinydash.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from tinydash.config.models import EqualityConfig, LoggingConfig, TelemetryConfig
from tinydash.errors import ConfigError


CONFIG_FILENAME = "tinydash.toml"
CONFIG_ENV_VAR = "TINYDASH_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Locate tinydash.toml in *start* (default: cwd) or its nearest ancestor.

    ``TINYDASH_CONFIG`` replaces the search; it must name an existing file.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    candidates = (directory / CONFIG_FILENAME for directory in (origin, *origin.parents))
    return next((path for path in candidates if path.is_file()), None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``tinydash.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise ConfigError(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class TinydashSettings(BaseSettings):
    """Unified, frozen settings for tinydash.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TINYDASH_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    equality: EqualityConfig = Field(default_factory=EqualityConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> TinydashSettings:
        """Construct settings from the environment.

        Uses the explicit *config_path* when it names a file, otherwise
        discovers ``tinydash.toml`` by walking up from *start*. *overrides*
        take precedence over every other source.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
