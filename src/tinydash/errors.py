"""Exception types raised by tinydash.

Utilities fail fast on arguments outside their input domain instead of
coercing them. Exceptions raised by user callbacks propagate unchanged.
"""

from __future__ import annotations

from typing import Any


class TinydashError(Exception):
    """Base class for all tinydash errors."""


class ContractError(TinydashError, TypeError):
    """An argument violates the input contract of a utility function.

    Attributes:
        func: Name of the utility that rejected the argument.
        param: Name of the offending parameter.
    """

    def __init__(self, func: str, param: str, message: str) -> None:
        super().__init__(f"{func}(): {param} {message}")
        self.func = func
        self.param = param


class ConfigError(TinydashError, ValueError):
    """A configuration file could not be parsed."""


def describe(value: Any) -> str:
    """Short type description used in error messages."""
    return type(value).__name__
