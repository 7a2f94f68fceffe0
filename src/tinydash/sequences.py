"""Sequence utilities.

Every function takes a non-text sequence and returns a new ``list``; the
argument is never mutated. Membership checks use SameValueZero
(:mod:`tinydash.domain.equality`) and predicate results are judged with the
explicit truthiness rule (:mod:`tinydash.domain.truthiness`).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from tinydash._helpers import require_callable, require_count, require_sequence
from tinydash.domain.equality import contains_same_value_zero
from tinydash.domain.sentinel import MISSING
from tinydash.domain.truthiness import is_truthy
from tinydash.telemetry import traced


@traced
def compact(seq: Sequence[Any]) -> list[Any]:
    """Return the truthy elements of *seq*, in order.

    Examples:
        >>> compact([0, 1, False, 2, "", 3])
        [1, 2, 3]
        >>> compact([None, float("nan"), [], {}])
        [[], {}]
    """
    require_sequence("compact", "seq", seq)
    return [item for item in seq if is_truthy(item)]


@traced
def drop(seq: Sequence[Any], n: int = 1) -> list[Any]:
    """Return *seq* without its first *n* elements.

    Negative *n* drops nothing.

    Examples:
        >>> drop([1, 2, 3])
        [2, 3]
        >>> drop([1, 2, 3], 5)
        []
    """
    require_sequence("drop", "seq", seq)
    count = require_count("drop", "n", n)
    return list(seq[max(count, 0) :])


@traced
def uniq(seq: Sequence[Any]) -> list[Any]:
    """Return *seq* with duplicates removed, keeping first occurrences.

    Works with unhashable elements.

    Examples:
        >>> uniq([2, 1, 2])
        [2, 1]
        >>> uniq([False, False, True, 1, 1])
        [False, True, 1]
    """
    require_sequence("uniq", "seq", seq)
    result: list[Any] = []
    for item in seq:
        if not contains_same_value_zero(result, item):
            result.append(item)
    return result


@traced
def without(seq: Sequence[Any], *values: Any) -> list[Any]:
    """Return the elements of *seq* not equal to any of *values*.

    Examples:
        >>> without([2, 1, 2, 3], 1, 2)
        [3]
        >>> without(["hello", "pizza", "world"], "pizza")
        ['hello', 'world']
    """
    require_sequence("without", "seq", seq)
    return [item for item in seq if not contains_same_value_zero(values, item)]


@traced
def filter_(seq: Sequence[Any], predicate: Callable[[Any], Any]) -> list[Any]:
    """Return the elements of *seq* for which *predicate* is truthy.

    The predicate is called exactly once per element, left to right.

    Examples:
        >>> filter_([1, 2, 3], lambda x: x > 2)
        [3]
    """
    require_sequence("filter", "seq", seq)
    require_callable("filter", "predicate", predicate)
    return [item for item in seq if is_truthy(predicate(item))]


@traced
def map_(seq: Sequence[Any], transform: Callable[[Any], Any]) -> list[Any]:
    """Return ``transform(item)`` for every element of *seq*.

    Examples:
        >>> map_(["hello", "world"], str.upper)
        ['HELLO', 'WORLD']
    """
    require_sequence("map", "seq", seq)
    require_callable("map", "transform", transform)
    return [transform(item) for item in seq]


@traced
def find(seq: Sequence[Any], predicate: Callable[[Any], Any]) -> Any:
    """Return the first element for which *predicate* is truthy.

    Stops at the first match. Returns :data:`MISSING` when nothing matches.

    Examples:
        >>> find([1, 2, 3], lambda x: x > 1)
        2
        >>> find([1, 2, 3], lambda x: x > 5)
        MISSING
    """
    require_sequence("find", "seq", seq)
    require_callable("find", "predicate", predicate)
    for item in seq:
        if is_truthy(predicate(item)):
            return item
    return MISSING


@traced
def find_last(seq: Sequence[Any], predicate: Callable[[Any], Any]) -> Any:
    """Like :func:`find`, scanning from the right.

    Examples:
        >>> find_last([1, 2, 3, 4], lambda x: x % 2 == 1)
        3
        >>> find_last([5, 12, 8, 130, 44, 1], lambda x: x > 10)
        44
    """
    require_sequence("find_last", "seq", seq)
    require_callable("find_last", "predicate", predicate)
    for index in range(len(seq) - 1, -1, -1):
        item = seq[index]
        if is_truthy(predicate(item)):
            return item
    return MISSING


@traced
def times(n: int, value: Any) -> list[Any]:
    """Return a list holding *value* *n* times.

    The same object is repeated; callables are not invoked. Zero or
    negative *n* gives an empty list.

    Examples:
        >>> times(3, 0)
        [0, 0, 0]
        >>> times(0, "x")
        []
    """
    count = require_count("times", "n", n)
    return [value] * max(count, 0)


@traced
def difference(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Return the elements of *a* that are not present in *b*.

    Order and duplicates come from *a*.

    Examples:
        >>> difference([2, 1], [2, 3])
        [1]
    """
    require_sequence("difference", "a", a)
    require_sequence("difference", "b", b)
    return [item for item in a if not contains_same_value_zero(b, item)]
