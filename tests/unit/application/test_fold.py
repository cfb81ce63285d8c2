"""Unit tests for the generic fold engine and Projection."""

from __future__ import annotations

import asyncio
import dataclasses
from typing import Any, Mapping

import pytest

from eventfold.application.event_sourcing import (
    EventContext,
    EventEnvelope,
    Fold,
    HistoryEntry,
    InMemoryEventStore,
    NewEvent,
    Projection,
)
from eventfold.kernel.errors import StoreError
from eventfold.kernel.time import FrozenClock
from eventfold.testing import FailingEventStore


@dataclasses.dataclass
class Counter:
    counter_id: str
    created_at: str = ""
    hits: list[int] = dataclasses.field(default_factory=list)
    total: int = 0
    finalized: int = 0


def _created(state: Counter, data: Mapping[str, Any]) -> None:
    state.created_at = data["createdAt"]


def _incremented(state: Counter, data: Mapping[str, Any]) -> None:
    state.hits.append(data["by"])


def _totals(state: Counter) -> None:
    state.total = sum(state.hits)
    state.finalized += 1


COUNTER = Fold(
    initial=lambda counter_id: Counter(counter_id=counter_id),
    reducers={"counter-created": _created, "incremented": _incremented},
    finalize=_totals,
)


def _envelopes(context: EventContext, *facts: tuple[str, dict[str, Any]]) -> list[EventEnvelope]:
    return [
        EventEnvelope.record(
            context.new_event("/counter/k1", fact, data),
            id=f"e{i}",
            time=context.clock.now(),
        )
        for i, (fact, data) in enumerate(facts)
    ]


class TestFold:
    def test_empty_stream_is_none(self, context: EventContext) -> None:
        assert COUNTER.run("k1", [], context) is None

    def test_folds_in_order_and_finalizes_once(self, context: EventContext) -> None:
        events = _envelopes(
            context,
            ("counter-created", {"createdAt": "t0"}),
            ("incremented", {"by": 2}),
            ("incremented", {"by": 3}),
        )
        state = COUNTER.run("k1", events, context)
        assert state is not None
        assert state.counter_id == "k1"
        assert state.created_at == "t0"
        assert state.hits == [2, 3]
        assert state.total == 5
        assert state.finalized == 1

    def test_unknown_fact_leaves_state_untouched(self, context: EventContext) -> None:
        events = _envelopes(
            context,
            ("counter-created", {"createdAt": "t0"}),
            ("renamed", {"name": "x"}),
        )
        state = COUNTER.run("k1", events, context)
        assert state is not None
        assert state.hits == []

    def test_foreign_namespace_ignored(self, context: EventContext) -> None:
        foreign = EventContext(namespace="com.other")
        events = _envelopes(context, ("counter-created", {"createdAt": "t0"})) + _envelopes(
            foreign, ("incremented", {"by": 9})
        )
        state = COUNTER.run("k1", events, context)
        assert state is not None
        assert state.total == 0

    def test_deterministic(self, context: EventContext) -> None:
        events = _envelopes(
            context,
            ("counter-created", {"createdAt": "t0"}),
            ("incremented", {"by": 1}),
        )
        assert COUNTER.run("k1", events, context) == COUNTER.run("k1", events, context)

    def test_handles(self) -> None:
        assert COUNTER.handles("incremented")
        assert not COUNTER.handles("decremented")

    def test_default_finalize_is_noop(self, context: EventContext) -> None:
        fold = Fold(initial=lambda i: Counter(counter_id=i), reducers={"incremented": _incremented})
        state = fold.run("k1", _envelopes(context, ("incremented", {"by": 4})), context)
        assert state is not None
        assert state.total == 0


class TestProjection:
    def _projection(self, store: Any, context: EventContext) -> Projection[Counter]:
        return Projection(
            store,
            context,
            domain="counter",
            id_field="counterId",
            created_fact="counter-created",
            fold=COUNTER,
        )

    def _seed(self, context: EventContext, counter_id: str) -> NewEvent:
        return context.new_event(
            f"/counter/{counter_id}",
            "counter-created",
            {"counterId": counter_id, "createdAt": "t0"},
        )

    def test_get_missing_is_none(self, store: InMemoryEventStore, context: EventContext) -> None:
        assert asyncio.run(self._projection(store, context).get("nope")) is None

    def test_get_reflects_latest_append(
        self, store: InMemoryEventStore, context: EventContext
    ) -> None:
        projection = self._projection(store, context)

        async def run() -> tuple[Counter | None, Counter | None]:
            await store.append([self._seed(context, "k1")])
            before = await projection.get("k1")
            await store.append([context.new_event("/counter/k1", "incremented", {"by": 5})])
            return before, await projection.get("k1")

        before, after = asyncio.run(run())
        assert before is not None and before.total == 0
        assert after is not None and after.total == 5

    def test_list_all_newest_first(
        self, store: InMemoryEventStore, context: EventContext, clock: FrozenClock
    ) -> None:
        projection = self._projection(store, context)

        async def run() -> list[Counter]:
            await store.append([self._seed(context, "a")])
            clock.advance(minutes=1)
            await store.append([self._seed(context, "b")])
            return await projection.list_all()

        assert [c.counter_id for c in asyncio.run(run())] == ["b", "a"]

    def test_list_all_empty(self, store: InMemoryEventStore, context: EventContext) -> None:
        assert asyncio.run(self._projection(store, context).list_all()) == []

    def test_history_is_raw_stream(
        self, store: InMemoryEventStore, context: EventContext, clock: FrozenClock
    ) -> None:
        projection = self._projection(store, context)

        async def run() -> list[HistoryEntry]:
            await store.append([self._seed(context, "k1")])
            await store.append([context.new_event("/counter/k1", "incremented", {"by": 1})])
            return await projection.history("k1")

        history = asyncio.run(run())
        assert [h.type for h in history] == [
            "io.eventfold.demo.counter-created",
            "io.eventfold.demo.incremented",
        ]
        assert history[1].data == {"by": 1}
        assert history[0].time == clock.now()

    def test_store_failure_propagates(self, context: EventContext) -> None:
        store = FailingEventStore()
        with pytest.raises(StoreError):
            asyncio.run(self._projection(store, context).get("k1"))
        assert store.calls == ["read_stream"]
