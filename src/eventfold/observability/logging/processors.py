"""Observability – structlog processors and the get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class CommandContextProcessor:
    """structlog processor that copies the bound command type onto every event.

    The HTTP boundary binds ``command_type`` with
    :func:`structlog.contextvars.bind_contextvars` for the duration of a
    dispatch; this processor renames it to ``command`` so handler log lines
    and failure lines share one key.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        command_type = event_dict.pop("command_type", None)
        if command_type is not None:
            event_dict.setdefault("command", command_type)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["CommandContextProcessor", "get_logger"]
