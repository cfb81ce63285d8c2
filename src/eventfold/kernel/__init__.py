"""Kernel – framework-agnostic building blocks (errors, time)."""

from eventfold.kernel.errors import (
    AggregateAlreadyExistsError,
    AggregateNotFoundError,
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    StoreError,
    UnknownCommandError,
    ValidationError,
)

__all__ = [
    "AggregateAlreadyExistsError",
    "AggregateNotFoundError",
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
    "StoreError",
    "UnknownCommandError",
    "ValidationError",
]
