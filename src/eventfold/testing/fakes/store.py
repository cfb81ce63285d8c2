"""Testing fakes – an event store that cannot be reached."""
from __future__ import annotations

from typing import Any, Sequence

from eventfold.application.event_sourcing import (
    EventEnvelope,
    EventQuery,
    EventStore,
    NewEvent,
    Precondition,
)
from eventfold.kernel.errors import StoreError


class FailingEventStore(EventStore):
    """Every call raises :class:`StoreError`; counts the attempts."""

    def __init__(self, message: str = "event store unreachable") -> None:
        self.message = message
        self.calls: list[str] = []

    def _fail(self, operation: str) -> StoreError:
        self.calls.append(operation)
        return StoreError(self.message, detail={"operation": operation})

    async def append(
        self,
        events: Sequence[NewEvent],  # noqa: ARG002
        preconditions: Sequence[Precondition] = (),  # noqa: ARG002
    ) -> list[EventEnvelope]:
        raise self._fail("append")

    async def read_stream(self, subject: str) -> list[EventEnvelope]:  # noqa: ARG002
        raise self._fail("read_stream")

    async def query(self, query: EventQuery) -> list[dict[str, Any]]:  # noqa: ARG002
        raise self._fail("query")


__all__ = ["FailingEventStore"]
