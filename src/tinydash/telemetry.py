"""Telemetry primitives — Span, @traced, trace_span.

Near-zero overhead when disabled (single ContextVar.get per call).
When enabled via ``[telemetry] enabled`` or ``configure(telemetry=True)``,
every utility call builds a span tree with timing and logs it at debug
level through structlog.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

# ── Context variables ────────────────────────────────────────────────

_enabled: ContextVar[bool] = ContextVar("_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("_current_span", default=None)
_last_span: ContextVar[Span | None] = ContextVar("_last_span", default=None)


# ── Span ─────────────────────────────────────────────────────────────


@dataclass
class Span:
    """Hierarchical timing span for one utility call."""

    name: str
    parent: Span | None = None
    children: list[Span] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None
    ok: bool | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def end(self, *, ok: bool = True) -> None:
        self.end_time = time.perf_counter()
        self.ok = ok

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "duration_ms": round(self.duration_ms, 2),
        }
        if self.ok is not None:
            result["ok"] = self.ok
        if self.annotations:
            result["annotations"] = self.annotations
        if self.children:
            result["children"] = [c.to_dict() for c in self.children]
        return result


# ── trace_span context manager ───────────────────────────────────────


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Create a child span under the current span.

    Yields None when telemetry is disabled or no span is active.
    """
    if not _enabled.get():
        yield None
        return

    parent = _current_span.get()
    if parent is None:
        yield None
        return

    child = Span(name=name, parent=parent)
    parent.children.append(child)

    token = _current_span.set(child)
    try:
        yield child
    except Exception:
        child.end(ok=False)
        raise
    else:
        child.end()
    finally:
        _current_span.reset(token)


# ── @traced decorator ────────────────────────────────────────────────


def _log_span(span: Span) -> None:
    log = structlog.get_logger("tinydash.telemetry")
    log.debug(
        "span.complete",
        span_name=span.name,
        duration_ms=round(span.duration_ms, 2),
        ok=span.ok,
        children=len(span.children),
    )


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Decorator: time a utility call as a span.

    Nested traced calls become children of the enclosing span. The
    outermost span is kept for :func:`last_span` once it completes.
    """

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        parent = _current_span.get()
        span = Span(name=func.__qualname__, parent=parent)
        if parent is not None:
            parent.children.append(span)

        token = _current_span.set(span)
        try:
            result = func(*args, **kwargs)
        except Exception:
            span.end(ok=False)
            raise
        else:
            span.end()
        finally:
            _current_span.reset(token)
            if parent is None:
                _last_span.set(span)
            _log_span(span)

        return result

    return wrapper


# ── Public helpers ───────────────────────────────────────────────────


def enable_telemetry() -> None:
    """Enable telemetry (called by ``configure`` when settings ask for it)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    """Disable telemetry."""
    _enabled.set(False)


def telemetry_enabled() -> bool:
    return _enabled.get()


def get_current_span() -> Span | None:
    """Get the current active span (for manual annotation)."""
    if not _enabled.get():
        return None
    return _current_span.get()


def last_span() -> Span | None:
    """The most recently completed root span, or None."""
    return _last_span.get()
