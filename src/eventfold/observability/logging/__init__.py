"""Observability – structured logging helpers."""
from eventfold.observability.logging.factory import JsonLoggerFactory
from eventfold.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from eventfold.observability.logging.processors import CommandContextProcessor, get_logger

__all__ = [
    "CommandContextProcessor",
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
