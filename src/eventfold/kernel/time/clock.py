"""Kernel time – Clock protocol + implementations.

Every action timestamp written into an event payload comes from a
:class:`Clock`, so tests can pin time with :class:`FrozenClock`.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: source of the current UTC time."""

    def now(self) -> datetime: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


def iso_now(clock: Clock) -> str:
    """ISO-8601 rendering of ``clock.now()`` used in event payloads."""
    return clock.now().isoformat()


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, treating a trailing ``Z`` and naive values as UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


__all__ = ["Clock", "FrozenClock", "SystemClock", "iso_now", "parse_iso"]
