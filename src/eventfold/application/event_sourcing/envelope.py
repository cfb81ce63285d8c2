"""Application event sourcing – event envelopes and the event context."""

from __future__ import annotations

import dataclasses
import re
from datetime import datetime
from typing import Any, Final

from eventfold.kernel.time import Clock, SystemClock

DEFAULT_SOURCE: Final = "tag:demo.eventfold.io"
DEFAULT_NAMESPACE: Final = "io.eventfold.demo"

_SUBJECT: Final = re.compile(r"^/(?P<domain>[a-z][a-z0-9-]*)/(?P<aggregate_id>[^/]+)$")


def subject_for(domain: str, aggregate_id: str) -> str:
    """Build the stream identifier ``/{domain}/{aggregateId}``."""
    return f"/{domain}/{aggregate_id}"


def split_subject(subject: str) -> tuple[str, str]:
    """Inverse of :func:`subject_for`; raises ``ValueError`` on a malformed subject."""
    match = _SUBJECT.match(subject)
    if match is None:
        raise ValueError(f"Malformed subject: {subject!r}")
    return match["domain"], match["aggregate_id"]


@dataclasses.dataclass(frozen=True)
class NewEvent:
    """An event built by a command handler, not yet accepted by the store."""

    source: str
    subject: str
    type: str
    data: dict[str, Any]


@dataclasses.dataclass(frozen=True)
class EventEnvelope:
    """An event as recorded by the store.

    ``id`` and ``time`` are assigned on append; nothing in this package
    mutates or removes an envelope afterwards.
    """

    id: str
    time: datetime
    source: str
    subject: str
    type: str
    data: dict[str, Any]

    @classmethod
    def record(cls, event: NewEvent, *, id: str, time: datetime) -> "EventEnvelope":  # noqa: A002
        return cls(
            id=id,
            time=time,
            source=event.source,
            subject=event.subject,
            type=event.type,
            data=dict(event.data),
        )


@dataclasses.dataclass(frozen=True)
class EventContext:
    """Where events come from and how their types are spelled.

    Event types are ``{namespace}.{fact}``, e.g. ``io.eventfold.demo.cart-created``.
    """

    source: str = DEFAULT_SOURCE
    namespace: str = DEFAULT_NAMESPACE
    clock: Clock = dataclasses.field(default_factory=SystemClock, compare=False)

    def type_of(self, fact: str) -> str:
        return f"{self.namespace}.{fact}"

    def fact_of(self, event_type: str) -> str | None:
        """Return the fact name of *event_type*, or ``None`` for foreign types."""
        prefix = f"{self.namespace}."
        if not event_type.startswith(prefix):
            return None
        return event_type[len(prefix):]

    def new_event(self, subject: str, fact: str, data: dict[str, Any]) -> NewEvent:
        return NewEvent(source=self.source, subject=subject, type=self.type_of(fact), data=data)


__all__ = [
    "DEFAULT_NAMESPACE",
    "DEFAULT_SOURCE",
    "EventContext",
    "EventEnvelope",
    "NewEvent",
    "split_subject",
    "subject_for",
]
