"""Application event sourcing – append preconditions.

A precondition is evaluated by the store together with the append it
guards; if it does not hold, nothing from the batch is written.
"""

from __future__ import annotations

import abc
import dataclasses


@dataclasses.dataclass(frozen=True)
class Precondition(abc.ABC):
    """Base for store-enforced guards on an append."""

    subject: str

    @property
    @abc.abstractmethod
    def kind(self) -> str:
        """Wire name of the precondition."""

    @abc.abstractmethod
    def holds(self, stream_length: int) -> bool:
        """Whether the guard is satisfied by a stream of *stream_length* events."""


@dataclasses.dataclass(frozen=True)
class SubjectIsNew(Precondition):
    """The subject's stream must be empty (creation commands)."""

    @property
    def kind(self) -> str:
        return "isSubjectNew"

    def holds(self, stream_length: int) -> bool:
        return stream_length == 0


@dataclasses.dataclass(frozen=True)
class SubjectExists(Precondition):
    """The subject's stream must already hold at least one event."""

    @property
    def kind(self) -> str:
        return "isSubjectExisting"

    def holds(self, stream_length: int) -> bool:
        return stream_length > 0


__all__ = ["Precondition", "SubjectExists", "SubjectIsNew"]
