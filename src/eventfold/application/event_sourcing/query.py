"""Application event sourcing – EventQuery.

The only query the projections need is "distinct aggregate ids taken
from every event of a creation type, newest first".  It is kept
structured here; :meth:`EventQuery.to_expression` renders the textual
stream-query form for stores that take a query string.
"""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class EventQuery:
    """Select ``data[project]`` from events of ``event_type``, distinct, ordered by time."""

    event_type: str
    project: str
    descending: bool = True

    def to_expression(self) -> str:
        direction = "DESC" if self.descending else "ASC"
        return (
            f'STREAM e FROM events WHERE e.type == "{self.event_type}" '
            f"ORDER BY e.time {direction} "
            f"MAP {{ {self.project}: e.data.{self.project} }}"
        )


__all__ = ["EventQuery"]
