"""tinydash — small sequence and mapping utilities."""

from __future__ import annotations

from tinydash.config import configure, get_settings
from tinydash.domain.equality import same_value_zero
from tinydash.domain.sentinel import MISSING, is_missing
from tinydash.domain.truthiness import is_falsy, is_truthy
from tinydash.errors import ConfigError, ContractError, TinydashError
from tinydash.mappings import assign, deep_objects_equal_check, find_key, find_last_key
from tinydash.sequences import (
    compact,
    difference,
    drop,
    filter_,
    find,
    find_last,
    map_,
    times,
    uniq,
    without,
)

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "ConfigError",
    "ContractError",
    "TinydashError",
    "__version__",
    "assign",
    "compact",
    "configure",
    "deep_objects_equal_check",
    "difference",
    "drop",
    "filter_",
    "find",
    "find_key",
    "find_last",
    "find_last_key",
    "get_settings",
    "is_falsy",
    "is_missing",
    "is_truthy",
    "map_",
    "same_value_zero",
    "times",
    "uniq",
    "without",
]
