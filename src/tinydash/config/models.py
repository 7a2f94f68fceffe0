"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tinydash.toml only contains
overrides. No file at all is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False


class EqualityConfig(BaseModel):
    """[equality] section.

    ``ordered_keys`` is the default for ``deep_objects_equal_check``:
    when true, key insertion order takes part in the comparison.
    """

    model_config = {"frozen": True}

    ordered_keys: bool = True


class TelemetryConfig(BaseModel):
    """[telemetry] section."""

    model_config = {"frozen": True}

    enabled: bool = False
