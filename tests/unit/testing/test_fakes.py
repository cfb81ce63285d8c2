"""Unit tests for the testing fakes."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime

import pytest

from eventfold.application.event_sourcing import EventContext, EventQuery
from eventfold.kernel.errors import StoreError
from eventfold.testing import FailingEventStore, FakeClock, FrozenClock


class TestFakeClock:
    def test_pinned_time(self) -> None:
        clock = FakeClock()
        assert isinstance(clock, FrozenClock)
        assert clock.now() == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def test_instances_are_independent(self) -> None:
        a, b = FakeClock(), FakeClock()
        a.advance(days=1)
        assert b.now() == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


class TestFailingEventStore:
    def test_every_operation_fails(self) -> None:
        store = FailingEventStore("boom")
        event = EventContext().new_event("/cart/c1", "cart-created", {})
        with pytest.raises(StoreError) as exc_info:
            asyncio.run(store.append([event]))
        assert exc_info.value.message == "boom"
        with pytest.raises(StoreError):
            asyncio.run(store.read_stream("/cart/c1"))
        with pytest.raises(StoreError):
            asyncio.run(store.query(EventQuery("t", "cartId")))
        assert store.calls == ["append", "read_stream", "query"]
