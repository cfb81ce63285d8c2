"""Shared fixtures."""
from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
import structlog

from eventfold.application.event_sourcing import EventContext, InMemoryEventStore
from eventfold.bootstrap import Services, build_services
from eventfold.config import AppSettings
from eventfold.kernel.time import FrozenClock
from eventfold.testing import FakeClock


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture(autouse=True)
def _isolated_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in [k for k in os.environ if k.startswith("EVENTFOLD_")]:
        monkeypatch.delenv(key)


@pytest.fixture
def clock() -> FrozenClock:
    return FakeClock()


@pytest.fixture
def context(clock: FrozenClock) -> EventContext:
    return EventContext(clock=clock)


@pytest.fixture
def store(clock: FrozenClock) -> InMemoryEventStore:
    return InMemoryEventStore(clock=clock)


@pytest.fixture
def services(store: InMemoryEventStore, clock: FrozenClock) -> Services:
    return build_services(AppSettings(), store=store, clock=clock)
