"""Application CQRS – CommandHandler and CommandRegistry.

Every handler follows the same four steps: validate the payload, build
the event(s), append them under a precondition, log one line.

Example::

    class CreateCounterHandler(CommandHandler[CreateCounter]):
        command_type = "create-counter"
        schema = CreateCounter
        domain = "counter"
        id_field = "counter_id"
        fact = "counter-created"
        timestamp_field = "createdAt"
        creates = True
        log_event = "counter_created"

    registry = CommandRegistry()
    registry.register_handler(CreateCounterHandler(store, context))
    await registry.dispatch("create-counter", {"counterId": "c1"})
"""
from __future__ import annotations

import abc
from typing import Any, ClassVar, Generic, Protocol

from eventfold.application.cqrs.schema import P, validate_payload
from eventfold.application.event_sourcing.envelope import (
    EventContext,
    EventEnvelope,
    NewEvent,
    subject_for,
)
from eventfold.application.event_sourcing.preconditions import (
    Precondition,
    SubjectExists,
    SubjectIsNew,
)
from eventfold.application.event_sourcing.store import EventStore, PreconditionFailedError
from eventfold.kernel.errors import (
    AggregateAlreadyExistsError,
    AggregateNotFoundError,
    UnknownCommandError,
)
from eventfold.kernel.time import iso_now
from eventfold.observability.logging import get_logger

logger = get_logger(__name__)


class Handler(Protocol):
    """Anything the registry can dispatch to."""

    async def handle(self, data: Any) -> Any: ...


class CommandHandler(abc.ABC, Generic[P]):
    """Validate → build → append → log, for one command type.

    Subclasses declare the class attributes below.  The default
    :meth:`build` emits a single event whose data is the validated payload
    (wire spelling) plus ``timestamp_field`` set to the current time.
    """

    command_type: ClassVar[str]
    schema: ClassVar[type[Any]]
    domain: ClassVar[str]
    id_field: ClassVar[str]
    fact: ClassVar[str]
    timestamp_field: ClassVar[str]
    log_event: ClassVar[str]
    creates: ClassVar[bool] = False

    def __init__(self, store: EventStore, context: EventContext) -> None:
        self._store = store
        self._context = context

    def validate(self, data: Any) -> P:
        return validate_payload(self.schema, data, command_type=self.command_type)

    def aggregate_id(self, payload: P) -> str:
        return str(getattr(payload, self.id_field))

    def subject(self, payload: P) -> str:
        return subject_for(self.domain, self.aggregate_id(payload))

    def now(self) -> str:
        return iso_now(self._context.clock)

    def event_data(self, payload: P) -> dict[str, Any]:
        data = payload.to_event_data()
        data[self.timestamp_field] = self.now()
        return data

    def build(self, payload: P) -> list[NewEvent]:
        return [self._context.new_event(self.subject(payload), self.fact, self.event_data(payload))]

    def precondition(self, subject: str) -> Precondition:
        return SubjectIsNew(subject) if self.creates else SubjectExists(subject)

    def log_fields(self, payload: P) -> dict[str, Any]:
        """Key identifiers for the observability line."""
        return {self.id_field: self.aggregate_id(payload)}

    async def handle(self, data: Any) -> list[EventEnvelope]:
        payload = self.validate(data)
        subject = self.subject(payload)
        events = self.build(payload)
        try:
            recorded = await self._store.append(events, [self.precondition(subject)])
        except PreconditionFailedError as exc:
            if isinstance(exc.precondition, SubjectIsNew):
                raise AggregateAlreadyExistsError(exc.precondition.subject, cause=exc) from exc
            raise AggregateNotFoundError(exc.precondition.subject, cause=exc) from exc
        logger.info(self.log_event, **self.log_fields(payload))
        return recorded


class CommandRegistry:
    """Maps command-type strings to handlers.

    Built once at start-up and handed to whoever dispatches.  Handlers are
    independent of each other, so concurrent dispatches only share the
    store behind them.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def register(self, command_type: str, handler: Handler) -> Handler | None:
        """Register *handler* for *command_type*.

        Re-registering overwrites the previous handler, logs a warning and
        returns the handler that was replaced.
        """
        previous = self._handlers.get(command_type)
        if previous is not None:
            logger.warning(
                "command_overwritten",
                command_type=command_type,
                previous=type(previous).__name__,
                handler=type(handler).__name__,
            )
        self._handlers[command_type] = handler
        return previous

    def register_handler(self, handler: CommandHandler[Any]) -> Handler | None:
        return self.register(handler.command_type, handler)

    async def dispatch(self, command_type: str, data: Any) -> Any:
        """Run the handler registered for *command_type* with *data*.

        Raises :class:`~eventfold.kernel.errors.UnknownCommandError` without
        touching the store when nothing is registered; handler failures
        propagate unchanged.
        """
        handler = self._handlers.get(command_type)
        if handler is None:
            raise UnknownCommandError(command_type)
        return await handler.handle(data)

    def registered_types(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, command_type: object) -> bool:
        return command_type in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


__all__ = ["CommandHandler", "CommandRegistry", "Handler"]
