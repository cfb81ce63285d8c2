"""Testing support – fakes for the clock and the event store.

Import in your tests::

    from eventfold.testing import FailingEventStore, FakeClock
"""

from eventfold.testing.fakes import FailingEventStore, FakeClock, FrozenClock

__all__ = ["FailingEventStore", "FakeClock", "FrozenClock"]
