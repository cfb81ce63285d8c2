"""FastAPI adapter – health, command and projection routers.

Route handlers are defined inside the factories; their annotations must
resolve at runtime, so this module does not use postponed annotations.
"""
from typing import Any

from eventfold.application.cqrs import CommandRegistry
from eventfold.application.event_sourcing import Projection
from eventfold.kernel.errors import NotFoundError, StoreError, ValidationError
from eventfold.observability.logging import get_logger

logger = get_logger(__name__)


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'eventfold[fastapi]' to use the FastAPI adapter"
        ) from exc


def FastAPIHealthRouter(path: str = "/health", tags: list[str] | None = None) -> Any:
    """Return a liveness router; ``{path}/live`` answers 200 while the process is up."""
    _require_fastapi()
    from fastapi import APIRouter

    router = APIRouter(tags=tags or ["ops"])

    @router.get(f"{path}/live")
    async def liveness() -> dict[str, str]:
        return {"status": "ok"}

    return router


def _parse_command(body: Any) -> tuple[str, Any]:
    if not isinstance(body, dict):
        raise ValidationError(
            "Command body must be an object",
            errors=[{"field": "__root__", "message": "Input should be an object", "type": "dict_type"}],
        )
    errors: list[dict[str, Any]] = []
    command_type = body.get("type")
    if not isinstance(command_type, str) or not command_type.strip():
        errors.append({"field": "type", "message": "Field required", "type": "missing"})
    if "data" not in body:
        errors.append({"field": "data", "message": "Field required", "type": "missing"})
    if errors:
        raise ValidationError("Command must carry a type and data", errors=errors)
    return command_type.strip(), body["data"]


def FastAPICommandRouter(registry: CommandRegistry, prefix: str = "/api") -> Any:
    """Return the command router.

    ``POST {prefix}/commands`` takes ``{"type": ..., "data": {...}}`` and
    dispatches it through *registry*; ``GET {prefix}/commands`` lists the
    registered command types.
    """
    _require_fastapi()
    import structlog
    from fastapi import APIRouter, Request

    from eventfold.kernel.errors import BaseError

    router = APIRouter(prefix=prefix, tags=["commands"])

    @router.post("/commands")
    async def dispatch(request: Request) -> dict[str, Any]:
        try:
            body = await request.json()
        except ValueError as exc:
            raise ValidationError(
                "Request body is not valid JSON",
                errors=[{"field": "__root__", "message": str(exc), "type": "json_invalid"}],
                cause=exc,
            ) from exc
        command_type, data = _parse_command(body)
        with structlog.contextvars.bound_contextvars(command_type=command_type):
            try:
                await registry.dispatch(command_type, data)
            except BaseError as exc:
                logger.warning("command_failed", code=exc.code, error=exc.message)
                raise
        return {"status": "ok", "type": command_type}

    @router.get("/commands")
    async def command_types() -> dict[str, list[str]]:
        return {"commands": registry.registered_types()}

    return router


def FastAPIProjectionRouter(
    name: str,
    projection: Projection[Any],
    prefix: str = "/api",
) -> Any:
    """Return read routes for one projection, mounted under ``{prefix}/{name}``.

    Parameters
    ----------
    name:
        Collection name used in the URL, e.g. ``"carts"``.
    projection:
        The projection the routes read from.
    prefix:
        Path prefix shared by all API routes.
    """
    _require_fastapi()
    import dataclasses

    from fastapi import APIRouter

    router = APIRouter(prefix=f"{prefix}/{name}", tags=[name])

    def _unavailable(exc: StoreError) -> StoreError:
        logger.error("projection_read_failed", collection=name, error=exc.message)
        return StoreError("Unable to load state", detail={"collection": name}, cause=exc)

    @router.get("")
    async def list_all() -> list[dict[str, Any]]:
        try:
            states = await projection.list_all()
        except StoreError as exc:
            raise _unavailable(exc) from exc
        return [dataclasses.asdict(state) for state in states]

    @router.get("/{aggregate_id}")
    async def get_one(aggregate_id: str) -> dict[str, Any]:
        try:
            state = await projection.get(aggregate_id)
        except StoreError as exc:
            raise _unavailable(exc) from exc
        if state is None:
            raise NotFoundError(projection.domain, aggregate_id)
        return dataclasses.asdict(state)

    @router.get("/{aggregate_id}/history")
    async def history(aggregate_id: str) -> list[dict[str, Any]]:
        try:
            entries = await projection.history(aggregate_id)
        except StoreError as exc:
            raise _unavailable(exc) from exc
        return [dataclasses.asdict(entry) for entry in entries]

    return router


__all__ = ["FastAPICommandRouter", "FastAPIHealthRouter", "FastAPIProjectionRouter"]
