"""Infrastructure errors – failures talking to the event store."""

from __future__ import annotations

from eventfold.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class StoreError(InfrastructureError):
    """The event store is unreachable or rejected a request for a transport reason.

    Not retried here; retries belong to the store client.
    """

    default_code = "store_error"


__all__ = ["InfrastructureError", "StoreError"]
