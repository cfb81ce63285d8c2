"""Application event sourcing – Projection: read a stream, fold it."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, Generic, TypeVar

from eventfold.application.event_sourcing.envelope import EventContext, subject_for
from eventfold.application.event_sourcing.fold import Fold
from eventfold.application.event_sourcing.query import EventQuery
from eventfold.application.event_sourcing.store import EventStore
from eventfold.observability.logging import get_logger

S = TypeVar("S")

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class HistoryEntry:
    """One raw event of a stream, as shown in an audit view."""

    id: str
    type: str
    data: dict[str, Any]
    time: datetime


class Projection(Generic[S]):
    """Current-state view of one kind of aggregate.

    Nothing is cached: every call reads the full stream and folds it, so
    the result always reflects the latest append.

    Parameters
    ----------
    store:
        The event store gateway.
    context:
        Event source/namespace, used to resolve event types.
    domain:
        Subject prefix, e.g. ``"cart"`` for ``/cart/{id}``.
    id_field:
        Payload key holding the aggregate id in creation events.
    created_fact:
        Fact name of the creation event, e.g. ``"cart-created"``.
    fold:
        The domain's fold description.
    """

    def __init__(
        self,
        store: EventStore,
        context: EventContext,
        *,
        domain: str,
        id_field: str,
        created_fact: str,
        fold: Fold[S],
    ) -> None:
        self._store = store
        self._context = context
        self.domain = domain
        self.id_field = id_field
        self.created_fact = created_fact
        self._fold = fold

    async def get(self, aggregate_id: str) -> S | None:
        """Return the snapshot of *aggregate_id*, or ``None`` if its stream is empty."""
        events = await self._store.read_stream(subject_for(self.domain, aggregate_id))
        return self._fold.run(aggregate_id, events, self._context)

    async def list_all(self) -> list[S]:
        """Fold every aggregate of this kind, newest creation first.

        One stream read per aggregate.
        """
        rows = await self._store.query(
            EventQuery(event_type=self._context.type_of(self.created_fact), project=self.id_field)
        )
        states: list[S] = []
        for row in rows:
            state = await self.get(str(row[self.id_field]))
            if state is not None:
                states.append(state)
        logger.debug("projection_listed", domain=self.domain, count=len(states))
        return states

    async def history(self, aggregate_id: str) -> list[HistoryEntry]:
        """Return the raw event history of *aggregate_id* in append order."""
        events = await self._store.read_stream(subject_for(self.domain, aggregate_id))
        return [
            HistoryEntry(id=e.id, type=e.type, data=dict(e.data), time=e.time)
            for e in events
        ]


__all__ = ["HistoryEntry", "Projection"]
