"""Config settings – AppSettings for the demo application."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from eventfold.application.event_sourcing.envelope import DEFAULT_NAMESPACE, DEFAULT_SOURCE
from eventfold.config.settings.base import Settings
from eventfold.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class AppSettings(Settings):
    """Runtime settings, read from ``EVENTFOLD_*`` environment variables.

    ``event_source`` tags every envelope this application produces;
    ``event_namespace`` prefixes every event type.
    """

    _prefix: ClassVar[str] = "EVENTFOLD"

    event_source: str = DEFAULT_SOURCE
    event_namespace: str = DEFAULT_NAMESPACE
    log_level: str = "INFO"
    log_json: bool = True
    loan_period_days: int = 14

    def _validate(self) -> None:
        if not self.event_source:
            raise InvalidSettingValueError("event_source", self.event_source, "must not be empty")
        if not self.event_namespace or self.event_namespace.endswith("."):
            raise InvalidSettingValueError(
                "event_namespace", self.event_namespace, "must be a non-empty dotted name"
            )
        if logging.getLevelName(self.log_level.upper()) == f"Level {self.log_level.upper()}":
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")
        if self.loan_period_days < 1:
            raise InvalidSettingValueError(
                "loan_period_days", self.loan_period_days, "must be at least 1"
            )


__all__ = ["AppSettings"]
