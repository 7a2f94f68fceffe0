"""SameValueZero equality — the comparison used by uniq, without, difference.

Differs from ``==`` in two places:

- NaN equals NaN.
- A ``bool`` never equals a non-``bool``, so ``True`` and ``1`` stay distinct.

``0.0`` and ``-0.0`` are equal, as are ``1`` and ``1.0``. Containers
compare by value, not by identity.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from tinydash.domain.truthiness import is_nan


def same_value_zero(a: Any, b: Any) -> bool:
    """Compare *a* and *b* with SameValueZero semantics.

    Examples:
        >>> same_value_zero(float("nan"), float("nan"))
        True
        >>> same_value_zero(True, 1)
        False
        >>> same_value_zero(0.0, -0.0)
        True
    """
    if a is b:
        return True
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    if is_nan(a) or is_nan(b):
        return is_nan(a) and is_nan(b)
    return bool(a == b)


def contains_same_value_zero(values: Iterable[Any], candidate: Any) -> bool:
    """Whether any element of *values* is SameValueZero-equal to *candidate*."""
    return any(same_value_zero(value, candidate) for value in values)
