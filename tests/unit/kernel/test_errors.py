"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

from mp_monitoring.kernel.errors import (
    BaseError,
    ConflictError,
    DomainError,
    RegistrationConflictError,
    SpecificationError,
)


class TestBaseError:
    def test_defaults(self) -> None:
        err = BaseError("boom")
        assert err.message == "boom"
        assert err.code == "base_error"
        assert err.detail == {}
        assert str(err) == "boom"

    def test_cause_is_chained(self) -> None:
        cause = ValueError("inner")
        err = BaseError("outer", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == "ValueError('inner')"

    def test_to_json(self) -> None:
        err = BaseError("boom", code="custom", detail={"k": 1})
        assert json.loads(err.to_json()) == {"code": "custom", "message": "boom", "detail": {"k": 1}}

    def test_repr(self) -> None:
        assert repr(BaseError("boom")) == "BaseError(code='base_error', message='boom')"


class TestSpecificationError:
    def test_default_message(self) -> None:
        err = SpecificationError("jvm.heap", "sometimes", kind="semantics")
        assert str(err) == "Unexpected semantics [sometimes] for jvm.heap"
        assert isinstance(err, DomainError)
        assert err.detail == {"metric": "jvm.heap", "token": "sometimes", "kind": "semantics"}


class TestRegistrationConflictError:
    def test_hierarchy_and_message(self) -> None:
        err = RegistrationConflictError("food")
        assert isinstance(err, ConflictError)
        assert err.metric_name == "food"
        assert "food" in str(err)
        assert err.code == "registration_conflict"
