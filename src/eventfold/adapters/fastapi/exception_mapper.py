"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'eventfold[fastapi]' to use the FastAPI adapter"
        ) from exc


class FastAPIExceptionMapper:
    """Register eventfold error → HTTP status-code mappings on a FastAPI app.

    Error body is the error's ``to_dict()`` plus the request's correlation
    id::

        {"code": "aggregate_not_found", "message": "...", "detail": {...},
         "correlation_id": "..."}

    Mappings
    --------
    ``ValidationError``      → 400
    ``UnknownCommandError``  → 400
    ``NotFoundError``        → 404
    ``ConflictError``        → 409
    ``InfrastructureError``  → 503
    ``ApplicationError``     → 400
    ``DomainError``          → 422

    Exceptions outside the hierarchy are left to the framework.
    """

    def __init__(self) -> None:
        _require_fastapi()
        from eventfold.kernel.errors import (
            ApplicationError,
            ConflictError,
            DomainError,
            InfrastructureError,
            NotFoundError,
            UnknownCommandError,
            ValidationError,
        )

        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (ValidationError, 400),
            (UnknownCommandError, 400),
            (NotFoundError, 404),
            (ConflictError, 409),
            (InfrastructureError, 503),
            (ApplicationError, 400),
            (DomainError, 422),
        ]

    def status_for(self, exc: BaseException) -> int | None:
        for exc_type, status in self._map:
            if isinstance(exc, exc_type):
                return status
        return None

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        from fastapi.responses import JSONResponse

        for exc_type, status in self._map:

            def make_handler(code: int) -> Callable[[Any, Any], Any]:
                async def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                    import structlog

                    from eventfold.kernel.errors.base import BaseError

                    if isinstance(exc, BaseError):
                        body = exc.to_dict()
                    else:
                        body = {"code": "error", "message": str(exc)}

                    context = structlog.contextvars.get_contextvars()
                    body["correlation_id"] = context.get("correlation_id")
                    return JSONResponse(status_code=code, content=body)

                return handler

            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FastAPIExceptionMapper"]
