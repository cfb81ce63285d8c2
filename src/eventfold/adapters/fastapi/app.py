"""FastAPI adapter – application factory."""
from __future__ import annotations

from typing import Any

from eventfold.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from eventfold.adapters.fastapi.middleware import FastAPICorrelationIdMiddleware, _require_fastapi
from eventfold.adapters.fastapi.routers import (
    FastAPICommandRouter,
    FastAPIHealthRouter,
    FastAPIProjectionRouter,
)
from eventfold.application.event_sourcing import EventStore
from eventfold.bootstrap import Services, build_services, configure_logging, load_settings
from eventfold.config import AppSettings
from eventfold.kernel.time import Clock


def create_app(
    settings: AppSettings | None = None,
    store: EventStore | None = None,
    *,
    clock: Clock | None = None,
    services: Services | None = None,
) -> Any:
    """Build the HTTP boundary around one :class:`~eventfold.bootstrap.Services`.

    Settings default to the ``EVENTFOLD_*`` environment.  Logging is not
    configured here; :func:`create_app_from_env` does that for a server
    process.  The services are reachable as ``app.state.services``.
    """
    _require_fastapi()
    from fastapi import FastAPI

    services = services or build_services(settings, store=store, clock=clock)

    app = FastAPI(title="eventfold demo")
    app.state.services = services
    app.add_middleware(FastAPICorrelationIdMiddleware)
    FastAPIExceptionMapper().register(app)

    app.include_router(FastAPIHealthRouter())
    app.include_router(FastAPICommandRouter(services.registry))
    for name, projection in services.projections.items():
        app.include_router(FastAPIProjectionRouter(name, projection))
    return app


def create_app_from_env() -> Any:
    """Process entry point: settings from ``EVENTFOLD_*``, logging configured.

    Serve with ``uvicorn --factory eventfold.adapters.fastapi.app:create_app_from_env``.
    """
    settings = load_settings()
    configure_logging(settings)
    return create_app(settings)


__all__ = ["create_app", "create_app_from_env"]
