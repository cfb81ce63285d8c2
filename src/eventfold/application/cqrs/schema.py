"""Application CQRS – command payload schemas (pydantic)."""
from __future__ import annotations

from typing import Annotated, Any, Mapping, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from eventfold.kernel.errors import ValidationError

Identifier = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100, pattern=r"^[A-Za-z0-9_.:-]+$"),
]
"""Aggregate / child-entity id: no ``/`` so that subjects stay unambiguous."""

Count = Annotated[int, Field(strict=True, gt=0)]
"""Strictly positive integer quantity."""

NonNegative = Annotated[int, Field(strict=True, ge=0)]

Price = Annotated[float, Field(gt=0, allow_inf_nan=False)]


def bounded(min_length: int, max_length: int) -> Any:
    """Trimmed string with length bounds."""
    return Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=min_length, max_length=max_length)
    ]


class CommandSchema(BaseModel):
    """Base for command payloads.

    Accepts the camel-case wire names (``cartId``) as well as the Python
    names; unknown keys are ignored.  Dumped with ``by_alias=True`` the
    payload becomes event data in wire spelling.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def to_event_data(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


P = TypeVar("P", bound=CommandSchema)


def _field_errors(exc: pydantic.ValidationError) -> list[dict[str, Any]]:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]) or "__root__",
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors(include_url=False)
    ]


def validate_payload(schema: type[P], data: Any, *, command_type: str) -> P:
    """Validate *data* against *schema*.

    Raises :class:`~eventfold.kernel.errors.ValidationError` with one entry
    per failing field.
    """
    if not isinstance(data, Mapping):
        raise ValidationError(
            f"Invalid payload for {command_type}: expected an object",
            errors=[{"field": "__root__", "message": "Input should be an object", "type": "dict_type"}],
        )
    try:
        return schema.model_validate(dict(data))
    except pydantic.ValidationError as exc:
        errors = _field_errors(exc)
        raise ValidationError(
            f"Invalid payload for {command_type}",
            errors=errors,
            detail={"type": command_type},
        ) from exc


__all__ = [
    "CommandSchema",
    "Count",
    "Identifier",
    "NonNegative",
    "Price",
    "bounded",
    "validate_payload",
]
