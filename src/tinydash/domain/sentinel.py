"""The absent marker returned by lookups that find nothing."""

from __future__ import annotations

from typing import Any, Final


class _Missing:
    """Singleton type of :data:`MISSING`.

    Falsy, and distinct from every valid element value including ``None``.
    """

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Missing:
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


def is_missing(value: Any) -> bool:
    """Whether *value* is the absent marker."""
    return value is MISSING
