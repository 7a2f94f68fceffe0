"""Mapping utilities.

Mappings are read in insertion order and never mutated; results are new
``dict`` objects. Key predicates are called as ``predicate(value, key,
mapping)``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

from tinydash._helpers import require_callable, require_mapping
from tinydash.config import active_settings
from tinydash.domain.sentinel import MISSING
from tinydash.domain.truthiness import is_truthy
from tinydash.errors import ContractError
from tinydash.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

KeyPredicate = Callable[[Any, Any, Mapping[Any, Any]], Any]


@traced
def assign(target: Mapping[Any, Any], source: Mapping[Any, Any]) -> dict[Any, Any]:
    """Return a copy of *target* with values overridden from *source*.

    Only keys of *target* are considered; keys unique to *source* are
    ignored. The override is shallow, so a nested mapping in *source*
    replaces the one in *target* wholesale.

    Examples:
        >>> assign({"a": 1, "b": 2}, {"a": 3, "b": 4})
        {'a': 3, 'b': 4}
        >>> assign({"a": 1}, {"b": 2})
        {'a': 1}
    """
    require_mapping("assign", "target", target)
    require_mapping("assign", "source", source)
    return {key: source[key] if key in source else value for key, value in target.items()}


def _json_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    # Same text json.dumps would give an int, float, bool or None key.
    return json.dumps(key)


def _json_ready(value: Any) -> Any:
    """Turn every nested Mapping into a dict with string keys, every list or tuple into a list."""
    if isinstance(value, Mapping):
        return {_json_key(key): _json_ready(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_ready(item) for item in value]
    return value


def _canonical(func: str, param: str, value: Mapping[Any, Any], *, sort_keys: bool) -> str:
    try:
        return json.dumps(_json_ready(value), sort_keys=sort_keys, separators=(",", ":"))
    except (TypeError, ValueError, RecursionError) as exc:
        raise ContractError(func, param, f"is not serializable: {exc}") from exc


@traced
def deep_objects_equal_check(
    a: Mapping[Any, Any],
    b: Mapping[Any, Any],
    *,
    ordered: bool | None = None,
) -> bool:
    """Compare two mappings structurally via their canonical JSON form.

    With *ordered* true, key insertion order is part of the comparison, so
    ``{"a": 1, "b": 2}`` and ``{"b": 2, "a": 1}`` are unequal. With
    *ordered* false, keys are sorted before comparing. ``None`` means true,
    unless ``configure()`` installed settings, in which case the
    ``[equality] ordered_keys`` value applies. The call itself never reads
    config files or the environment.

    Any Mapping is accepted at any depth. Keys are compared as their JSON
    text, so ``{1: "a"}`` equals ``{"1": "a"}``. Tuples compare like lists.
    ``1`` and ``1.0`` serialize differently and compare unequal. NaN
    serializes as ``NaN`` rather than ``null``, so ``{"a": nan}`` equals
    ``{"a": nan}`` but not ``{"a": None}``. Other values must be
    JSON-serializable.
    """
    require_mapping("deep_objects_equal_check", "a", a)
    require_mapping("deep_objects_equal_check", "b", b)
    if ordered is None:
        settings = active_settings()
        ordered = settings.equality.ordered_keys if settings is not None else True

    with trace_span("serialize") as span:
        left = _canonical("deep_objects_equal_check", "a", a, sort_keys=not ordered)
        right = _canonical("deep_objects_equal_check", "b", b, sort_keys=not ordered)
        if span is not None:
            span.annotate("ordered", ordered)
            span.annotate("chars", len(left) + len(right))

    equal = left == right
    if not equal:
        logger.debug("Mappings differ (ordered=%s): %s != %s", ordered, left, right)
    return equal


def _scan_keys(
    func: str,
    mapping: Mapping[Any, Any],
    predicate: KeyPredicate,
    *,
    reverse: bool,
) -> Any:
    require_mapping(func, "mapping", mapping)
    require_callable(func, "predicate", predicate)
    keys = list(mapping)
    if reverse:
        keys.reverse()
    for key in keys:
        if is_truthy(predicate(mapping[key], key, mapping)):
            return key
    return MISSING


@traced
def find_key(mapping: Mapping[Any, Any], predicate: KeyPredicate, reverse: bool = False) -> Any:
    """Return the first key whose ``predicate(value, key, mapping)`` is truthy.

    *reverse* scans from the last key instead. Returns :data:`MISSING`
    when no key matches.

    Examples:
        >>> find_key({"a": 10, "b": 20, "c": 30}, lambda v, k, m: v > 10)
        'b'
        >>> find_key({"a": 10, "b": 20, "c": 30}, lambda v, k, m: v > 10, reverse=True)
        'c'
    """
    return _scan_keys("find_key", mapping, predicate, reverse=bool(reverse))


@traced
def find_last_key(mapping: Mapping[Any, Any], predicate: KeyPredicate) -> Any:
    """Return the last key (insertion order) whose predicate is truthy.

    Examples:
        >>> find_last_key({"a": 1, "b": 0, "c": 2}, lambda v, k, m: v)
        'c'
    """
    return _scan_keys("find_last_key", mapping, predicate, reverse=True)
