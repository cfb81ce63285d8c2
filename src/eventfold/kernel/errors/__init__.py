"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                  (domain.py)
    │   ├── ValidationError
    │   ├── NotFoundError
    │   │   └── AggregateNotFoundError
    │   └── ConflictError
    │       └── AggregateAlreadyExistsError
    ├── ApplicationError             (application.py)
    │   └── UnknownCommandError
    └── InfrastructureError          (infrastructure.py)
        └── StoreError
"""

from eventfold.kernel.errors.application import ApplicationError, UnknownCommandError
from eventfold.kernel.errors.base import BaseError
from eventfold.kernel.errors.domain import (
    AggregateAlreadyExistsError,
    AggregateNotFoundError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from eventfold.kernel.errors.infrastructure import InfrastructureError, StoreError

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
