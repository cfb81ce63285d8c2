"""Application CQRS – command schemas, handlers and the registry."""
from eventfold.application.cqrs.commands import CommandHandler, CommandRegistry, Handler
from eventfold.application.cqrs.schema import (
    CommandSchema,
    Count,
    Identifier,
    NonNegative,
    Price,
    bounded,
    validate_payload,
)

__all__ = [
    "CommandHandler",
    "CommandRegistry",
    "CommandSchema",
    "Count",
    "Handler",
    "Identifier",
    "NonNegative",
    "Price",
    "bounded",
    "validate_payload",
]
