"""Domain errors – input and aggregate-state rule violations."""

from __future__ import annotations

from typing import Any

from eventfold.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a command breaks a domain rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Command input does not satisfy its schema.

    ``errors`` holds one entry per failing field::

        {"field": "price", "message": "Input should be greater than 0", "type": "greater_than"}
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors]

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(self, resource: str, identifier: Any = None, **kwargs: Any) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


class AggregateNotFoundError(NotFoundError):
    """A mutating command targeted a subject with an empty stream."""

    default_code = "aggregate_not_found"

    def __init__(self, subject: str, **kwargs: Any) -> None:
        super().__init__("Aggregate", subject, detail={"subject": subject}, **kwargs)
        self.subject = subject


class AggregateAlreadyExistsError(ConflictError):
    """A creation command targeted a subject that already has events."""

    default_code = "aggregate_already_exists"

    def __init__(self, subject: str, **kwargs: Any) -> None:
        super().__init__(
            f"Aggregate '{subject}' already exists",
            detail={"subject": subject},
            **kwargs,
        )
        self.subject = subject


__all__ = [
    "AggregateAlreadyExistsError",
    "AggregateNotFoundError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
