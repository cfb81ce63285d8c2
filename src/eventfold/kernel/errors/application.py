"""Application-layer errors – raised while routing a command."""

from __future__ import annotations

from typing import Any

from eventfold.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Use-case level failure that is not a domain rule."""

    default_code = "application_error"


class UnknownCommandError(ApplicationError):
    """No handler is registered for the dispatched command type."""

    default_code = "unknown_command"

    def __init__(self, command_type: str, **kwargs: Any) -> None:
        super().__init__(
            f"No handler registered for command type: {command_type}",
            detail={"type": command_type},
            **kwargs,
        )
        self.command_type = command_type


__all__ = ["ApplicationError", "UnknownCommandError"]
