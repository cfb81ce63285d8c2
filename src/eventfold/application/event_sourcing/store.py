"""Application event sourcing – EventStore port and InMemoryEventStore."""

from __future__ import annotations

import abc
import asyncio
import copy
import dataclasses
import uuid
from typing import Any, Sequence

from eventfold.application.event_sourcing.envelope import EventEnvelope, NewEvent
from eventfold.application.event_sourcing.preconditions import Precondition
from eventfold.application.event_sourcing.query import EventQuery
from eventfold.kernel.errors import ConflictError
from eventfold.kernel.time import Clock, SystemClock


class PreconditionFailedError(ConflictError):
    """Raised by a store when an append precondition does not hold."""

    default_code = "precondition_failed"

    def __init__(self, precondition: Precondition) -> None:
        super().__init__(
            f"Precondition {precondition.kind} failed for subject '{precondition.subject}'",
            detail={"precondition": precondition.kind, "subject": precondition.subject},
        )
        self.precondition = precondition


class EventStore(abc.ABC):
    """Port – the external append-only event store.

    Implementations must evaluate *preconditions* and write the batch
    atomically per call, and must return a subject's events in append
    order.  Transport failures surface as
    :class:`~eventfold.kernel.errors.StoreError`.
    """

    @abc.abstractmethod
    async def append(
        self,
        events: Sequence[NewEvent],
        preconditions: Sequence[Precondition] = (),
    ) -> list[EventEnvelope]:
        """Append *events* if every precondition holds; return the recorded envelopes.

        Raises :class:`PreconditionFailedError` (nothing written) otherwise.
        """

    @abc.abstractmethod
    async def read_stream(self, subject: str) -> list[EventEnvelope]:
        """Return every event of *subject* in append order (empty if unknown)."""

    @abc.abstractmethod
    async def query(self, query: EventQuery) -> list[dict[str, Any]]:
        """Run *query* and return its rows."""


def _detached(envelope: EventEnvelope) -> EventEnvelope:
    """Copy of *envelope* whose payload shares nothing with the stored one."""
    return dataclasses.replace(envelope, data=copy.deepcopy(envelope.data))


class InMemoryEventStore(EventStore):
    """In-memory :class:`EventStore` for the demo app and tests.

    One lock serialises appends, so a precondition check and the batch it
    guards are never interleaved with another append.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()
        self._lock = asyncio.Lock()
        # subject → ordered envelopes
        self._streams: dict[str, list[EventEnvelope]] = {}
        # global append log, used for queries
        self._log: list[EventEnvelope] = []

    async def append(
        self,
        events: Sequence[NewEvent],
        preconditions: Sequence[Precondition] = (),
    ) -> list[EventEnvelope]:
        async with self._lock:
            for precondition in preconditions:
                if not precondition.holds(len(self._streams.get(precondition.subject, []))):
                    raise PreconditionFailedError(precondition)
            recorded = [
                EventEnvelope.record(
                    NewEvent(e.source, e.subject, e.type, copy.deepcopy(e.data)),
                    id=str(uuid.uuid4()),
                    time=self._clock.now(),
                )
                for e in events
            ]
            for envelope in recorded:
                self._streams.setdefault(envelope.subject, []).append(envelope)
                self._log.append(envelope)
            return [_detached(envelope) for envelope in recorded]

    async def read_stream(self, subject: str) -> list[EventEnvelope]:
        return [_detached(envelope) for envelope in self._streams.get(subject, [])]

    async def query(self, query: EventQuery) -> list[dict[str, Any]]:
        matching = [
            (envelope.time, seq, envelope)
            for seq, envelope in enumerate(self._log)
            if envelope.type == query.event_type
        ]
        matching.sort(key=lambda item: (item[0], item[1]), reverse=query.descending)
        rows: list[dict[str, Any]] = []
        seen: set[Any] = set()
        for _, _, envelope in matching:
            value = envelope.data.get(query.project)
            if value is None or value in seen:
                continue
            seen.add(value)
            rows.append({query.project: value})
        return rows

    def stream_length(self, subject: str) -> int:
        """Return the current number of events in *subject*."""
        return len(self._streams.get(subject, []))

    def all_events(self) -> list[EventEnvelope]:
        """Return every recorded envelope in global append order."""
        return [_detached(envelope) for envelope in self._log]


__all__ = ["EventStore", "InMemoryEventStore", "PreconditionFailedError"]
