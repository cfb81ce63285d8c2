"""Testing fakes – in-memory doubles for ports."""
from eventfold.kernel.time import FrozenClock
from eventfold.testing.fakes.clock import FakeClock
from eventfold.testing.fakes.store import FailingEventStore

__all__ = ["FailingEventStore", "FakeClock", "FrozenClock"]
