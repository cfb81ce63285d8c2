"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from eventfold.kernel.errors import (
    AggregateAlreadyExistsError,
    AggregateNotFoundError,
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    StoreError,
    UnknownCommandError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_leaves_cause_out(self) -> None:
        err = BaseError("wrapper", cause=ValueError("connection string with secrets"))
        d = err.to_dict()
        assert "cause" not in d
        assert "secrets" not in json.dumps(d)

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"


class TestHierarchy:
    @pytest.mark.parametrize(
        ("cls", "parent"),
        [
            (ValidationError, DomainError),
            (NotFoundError, DomainError),
            (ConflictError, DomainError),
            (AggregateNotFoundError, NotFoundError),
            (AggregateAlreadyExistsError, ConflictError),
            (UnknownCommandError, ApplicationError),
            (StoreError, InfrastructureError),
        ],
    )
    def test_subclassing(self, cls: type[BaseError], parent: type[BaseError]) -> None:
        assert issubclass(cls, parent)
        assert issubclass(cls, BaseError)


class TestValidationError:
    def test_errors_default_empty(self) -> None:
        assert ValidationError("bad").errors == []

    def test_fields_lists_failing_fields(self) -> None:
        err = ValidationError(
            "bad",
            errors=[
                {"field": "price", "message": "too small", "type": "greater_than"},
                {"field": "cartId", "message": "missing", "type": "missing"},
            ],
        )
        assert err.fields == ["price", "cartId"]

    def test_to_dict_includes_errors(self) -> None:
        errors = [{"field": "price", "message": "too small", "type": "greater_than"}]
        d = ValidationError("bad", errors=errors).to_dict()
        assert d["code"] == "validation_error"
        assert d["errors"] == errors


class TestAggregateErrors:
    def test_not_found_carries_subject(self) -> None:
        err = AggregateNotFoundError("/cart/c1")
        assert err.subject == "/cart/c1"
        assert err.code == "aggregate_not_found"
        assert err.detail == {"subject": "/cart/c1"}
        assert "/cart/c1" in err.message

    def test_already_exists_carries_subject(self) -> None:
        err = AggregateAlreadyExistsError("/todo/l1")
        assert err.subject == "/todo/l1"
        assert err.code == "aggregate_already_exists"
        assert err.message == "Aggregate '/todo/l1' already exists"

    def test_not_found_message_with_identifier(self) -> None:
        assert NotFoundError("cart", "c1").message == "cart 'c1' not found"
        assert NotFoundError("cart").message == "cart not found"


class TestUnknownCommandError:
    def test_message_names_the_type(self) -> None:
        err = UnknownCommandError("no-such-command")
        assert err.message == "No handler registered for command type: no-such-command"
        assert err.command_type == "no-such-command"
        assert err.code == "unknown_command"
        assert err.detail == {"type": "no-such-command"}


class TestStoreError:
    def test_default_code(self) -> None:
        assert StoreError("down").code == "store_error"
