"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

from uowkit.config.validation import ConfigError
from uowkit.kernel.errors import (
    BaseError,
    InfrastructureError,
    InvalidRepositoryTypeError,
    RepositoryAlreadyRegisteredError,
    RepositoryNotRegisteredError,
    TransactionBeginError,
)


class TestBaseError:
    def test_defaults(self) -> None:
        err = BaseError("something broke")
        assert err.message == "something broke"
        assert err.code == "base_error"
        assert err.detail == {}
        assert err.cause is None

    def test_str_is_json(self) -> None:
        err = BaseError("x", code="custom", detail={"k": 1})
        assert json.loads(str(err)) == {"code": "custom", "message": "x", "detail": {"k": 1}}

    def test_repr(self) -> None:
        assert repr(BaseError("x")) == "BaseError(code='base_error', message='x')"

    def test_cause_is_chained(self) -> None:
        cause = ValueError("inner")
        err = BaseError("outer", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == "ValueError('inner')"


class TestRegistryErrors:
    def test_not_registered(self) -> None:
        err = RepositoryNotRegisteredError("ProductRepository")
        assert err.name == "ProductRepository"
        assert err.code == "repository_not_registered"
        assert err.message == "Repository 'ProductRepository' not registered"

    def test_already_registered(self) -> None:
        err = RepositoryAlreadyRegisteredError("ProductRepository")
        assert err.code == "repository_already_registered"
        assert "already registered" in err.message

    def test_invalid_type_detail(self) -> None:
        err = InvalidRepositoryTypeError("orders", expected=int, actual=str)
        assert err.detail == {"expected": "int", "actual": "str"}
        assert err.message == "Repository 'orders' is 'str', expected 'int'"


class TestInfrastructureErrors:
    def test_begin_error_keeps_cause(self) -> None:
        cause = ConnectionRefusedError("refused")
        err = TransactionBeginError(cause)
        assert isinstance(err, InfrastructureError)
        assert err.cause is cause
        assert err.__cause__ is cause
        assert "refused" in err.message

    def test_config_error_is_base_error(self) -> None:
        assert issubclass(ConfigError, BaseError)
