"""Shared argument checks for the utility modules."""

from __future__ import annotations

import operator
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from tinydash.errors import ContractError, describe

_TEXT_TYPES = (str, bytes, bytearray)


def require_sequence(func: str, param: str, value: Any) -> Sequence[Any]:
    """Return *value* if it is a non-text sequence, else raise ContractError."""
    if isinstance(value, _TEXT_TYPES) or not isinstance(value, Sequence):
        raise ContractError(func, param, f"must be a sequence, not {describe(value)}")
    return value


def require_mapping(func: str, param: str, value: Any) -> Mapping[Any, Any]:
    """Return *value* if it is a mapping, else raise ContractError."""
    if not isinstance(value, Mapping):
        raise ContractError(func, param, f"must be a mapping, not {describe(value)}")
    return value


def require_callable(func: str, param: str, value: Any) -> Callable[..., Any]:
    """Return *value* if it is callable, else raise ContractError."""
    if not callable(value):
        raise ContractError(func, param, f"must be callable, not {describe(value)}")
    return value


def require_count(func: str, param: str, value: Any) -> int:
    """Coerce an integer-like count, rejecting bools and floats.

    Examples:
        >>> require_count("drop", "n", 2)
        2
    """
    if isinstance(value, bool):
        raise ContractError(func, param, "must be an integer, not bool")
    try:
        return operator.index(value)
    except TypeError:
        raise ContractError(func, param, f"must be an integer, not {describe(value)}") from None
