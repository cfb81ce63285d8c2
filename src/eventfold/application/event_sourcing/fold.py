"""Application event sourcing – the generic fold engine.

A domain describes its aggregate as data: a zero-state factory, a table
of reducers keyed by fact name, and a finaliser that recomputes derived
fields.  :meth:`Fold.run` replays a stream through that description.

Example::

    def _created(state: Counter, data: dict[str, Any]) -> None:
        state.created_at = data["createdAt"]

    def _incremented(state: Counter, data: dict[str, Any]) -> None:
        state.hits.append(data["by"])

    def _totals(state: Counter) -> None:
        state.total = sum(state.hits)

    COUNTER = Fold(
        initial=lambda counter_id: Counter(counter_id=counter_id),
        reducers={"counter-created": _created, "incremented": _incremented},
        finalize=_totals,
    )
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Iterable, Mapping, TypeVar

from eventfold.application.event_sourcing.envelope import EventContext, EventEnvelope

S = TypeVar("S")

Reducer = Callable[[S, Mapping[str, Any]], None]
"""Apply one event payload to the accumulator in place.

A reducer whose target child entity is absent must return without
changing anything; it must never raise for that case.
"""


@dataclasses.dataclass(frozen=True)
class Fold(Generic[S]):
    """Pure reduction of an ordered event stream into an aggregate snapshot."""

    initial: Callable[[str], S]
    reducers: Mapping[str, Reducer[S]]
    finalize: Callable[[S], None] = lambda state: None

    def run(
        self,
        aggregate_id: str,
        events: Iterable[EventEnvelope],
        context: EventContext,
    ) -> S | None:
        """Fold *events* in order; ``None`` when there are no events at all.

        Events whose type is outside the context's namespace, or whose fact
        has no reducer, leave the state untouched.  Derived fields are
        recomputed once at the end from the final accumulator.
        """
        state: S | None = None
        for event in events:
            if state is None:
                state = self.initial(aggregate_id)
            fact = context.fact_of(event.type)
            reducer = self.reducers.get(fact) if fact is not None else None
            if reducer is not None:
                reducer(state, event.data)
        if state is not None:
            self.finalize(state)
        return state

    def handles(self, fact: str) -> bool:
        return fact in self.reducers


__all__ = ["Fold", "Reducer"]
