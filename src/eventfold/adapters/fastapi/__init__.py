"""FastAPI adapter – app factory, routers, exception mapper, middleware."""
from eventfold.adapters.fastapi.app import create_app, create_app_from_env
from eventfold.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from eventfold.adapters.fastapi.middleware import FastAPICorrelationIdMiddleware
from eventfold.adapters.fastapi.routers import (
    FastAPICommandRouter,
    FastAPIHealthRouter,
    FastAPIProjectionRouter,
)

__all__ = [
    "FastAPICommandRouter",
    "FastAPICorrelationIdMiddleware",
    "FastAPIExceptionMapper",
    "FastAPIHealthRouter",
    "FastAPIProjectionRouter",
    "create_app",
    "create_app_from_env",
]
