"""Explicit truthiness rule used by compact and every predicate check.

Python's own ``bool()`` treats empty containers as false. The rule here
does not: only the values listed below are falsy.

- ``False`` and ``None``
- the absent marker :data:`~tinydash.domain.sentinel.MISSING`
- numeric zero of any type (``0``, ``0.0``, ``-0.0``, ``0j``, ``Decimal(0)``)
- the empty string ``""``
- not-a-number
"""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any

from tinydash.domain.sentinel import MISSING


def is_nan(value: Any) -> bool:
    """Whether *value* is a numeric not-a-number.

    Examples:
        >>> is_nan(float("nan"))
        True
        >>> is_nan(0.0)
        False
        >>> is_nan("nan")
        False
    """
    if isinstance(value, Decimal):
        # Comparing a signaling NaN raises InvalidOperation.
        return value.is_nan()
    return isinstance(value, numbers.Number) and value != value


def is_falsy(value: Any) -> bool:
    """Whether *value* is excluded by the truthiness rule.

    Examples:
        >>> [is_falsy(v) for v in (0, "", None, [], "0")]
        [True, True, True, False, False]
    """
    if value is None or value is False or value is MISSING:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, numbers.Number):
        return is_nan(value) or value == 0
    return False


def is_truthy(value: Any) -> bool:
    """Negation of :func:`is_falsy`."""
    return not is_falsy(value)
