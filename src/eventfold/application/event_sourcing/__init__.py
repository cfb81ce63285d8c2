"""Application – Event Sourcing."""

from eventfold.application.event_sourcing.envelope import (
    DEFAULT_NAMESPACE,
    DEFAULT_SOURCE,
    EventContext,
    EventEnvelope,
    NewEvent,
    split_subject,
    subject_for,
)
from eventfold.application.event_sourcing.fold import Fold, Reducer
from eventfold.application.event_sourcing.preconditions import (
    Precondition,
    SubjectExists,
    SubjectIsNew,
)
from eventfold.application.event_sourcing.projection import HistoryEntry, Projection
from eventfold.application.event_sourcing.query import EventQuery
from eventfold.application.event_sourcing.store import (
    EventStore,
    InMemoryEventStore,
    PreconditionFailedError,
)

__all__ = [
    "DEFAULT_NAMESPACE",
    "DEFAULT_SOURCE",
    "EventContext",
    "EventEnvelope",
    "EventQuery",
    "EventStore",
    "Fold",
    "HistoryEntry",
    "InMemoryEventStore",
    "NewEvent",
    "Precondition",
    "PreconditionFailedError",
    "Projection",
    "Reducer",
    "SubjectExists",
    "SubjectIsNew",
    "split_subject",
    "subject_for",
]
