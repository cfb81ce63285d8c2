"""Wiring – build the store, event context, command registry and projections once.

Example::

    services = build_services(AppSettings())
    await services.registry.dispatch("create-cart", {"cartId": "c1"})
    cart = await services.projections["carts"].get("c1")
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Iterable

from eventfold.application.cqrs import CommandHandler, CommandRegistry
from eventfold.application.event_sourcing import (
    EventContext,
    EventStore,
    InMemoryEventStore,
    Projection,
)
from eventfold.config import AppSettings, EnvSettingsLoader
from eventfold.domains import cart, inventory, library, todo
from eventfold.kernel.time import Clock, SystemClock
from eventfold.observability.logging import JsonLoggerFactory, get_logger

logger = get_logger(__name__)

HandlerFactory = Callable[[EventStore, EventContext, AppSettings], Iterable[CommandHandler[Any]]]
ProjectionFactory = Callable[[EventStore, EventContext], Projection[Any]]

COMMAND_HANDLERS: tuple[HandlerFactory, ...] = (
    cart.command_handlers,
    inventory.command_handlers,
    library.command_handlers,
    todo.command_handlers,
)

# Collection name (as used in URLs) -> projection factory.
PROJECTIONS: dict[str, ProjectionFactory] = {
    "carts": cart.cart_projection,
    "warehouses": inventory.warehouse_projection,
    "libraries": library.library_projection,
    "lists": todo.todo_projection,
}


@dataclasses.dataclass(frozen=True)
class Services:
    """Everything a dispatch entry point needs, built once at start-up."""

    settings: AppSettings
    context: EventContext
    store: EventStore
    registry: CommandRegistry
    projections: dict[str, Projection[Any]]


def build_registry(
    store: EventStore,
    context: EventContext,
    settings: AppSettings,
    factories: Iterable[HandlerFactory] = COMMAND_HANDLERS,
) -> CommandRegistry:
    registry = CommandRegistry()
    for factory in factories:
        for handler in factory(store, context, settings):
            registry.register_handler(handler)
    return registry


def build_services(
    settings: AppSettings | None = None,
    *,
    store: EventStore | None = None,
    clock: Clock | None = None,
) -> Services:
    """Assemble the application.

    Parameters
    ----------
    settings:
        Loaded from ``EVENTFOLD_*`` environment variables when omitted.
    store:
        Event store gateway; an :class:`InMemoryEventStore` when omitted.
    clock:
        Source of action timestamps; shared with the in-memory store.
    """
    settings = settings or load_settings()
    clock = clock or SystemClock()
    context = EventContext(
        source=settings.event_source,
        namespace=settings.event_namespace,
        clock=clock,
    )
    store = store if store is not None else InMemoryEventStore(clock=clock)
    registry = build_registry(store, context, settings)
    projections = {name: factory(store, context) for name, factory in PROJECTIONS.items()}
    logger.info(
        "services_built",
        commands=len(registry),
        projections=sorted(projections),
        store=type(store).__name__,
    )
    return Services(
        settings=settings,
        context=context,
        store=store,
        registry=registry,
        projections=projections,
    )


def load_settings() -> AppSettings:
    """Read :class:`AppSettings` from the process environment."""
    return EnvSettingsLoader().load(AppSettings)


def configure_logging(settings: AppSettings) -> None:
    JsonLoggerFactory.configure(settings.log_level, json=settings.log_json)


__all__ = [
    "COMMAND_HANDLERS",
    "PROJECTIONS",
    "Services",
    "build_registry",
    "build_services",
    "configure_logging",
    "load_settings",
]
