"""Unit tests for RepositoryFactoryRegistry."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from uowkit.application.uow import RepositoryFactoryRegistry
from uowkit.kernel.errors import (
    RegistryError,
    RepositoryAlreadyRegisteredError,
    RepositoryNotRegisteredError,
)

repository_names = st.text(min_size=1, max_size=30)


def _factory(tx: Any) -> object:
    return object()


class TestRegister:
    def test_register_stores_binding(self) -> None:
        registry = RepositoryFactoryRegistry()
        registry.register("ProductRepository", _factory)
        assert registry.has("ProductRepository")
        assert registry.factories["ProductRepository"] is _factory

    def test_register_twice_keeps_first_binding(self) -> None:
        registry = RepositoryFactoryRegistry()
        registry.register("ProductRepository", _factory)

        def other(tx: Any) -> object:
            return "other"

        with pytest.raises(RepositoryAlreadyRegisteredError) as exc_info:
            registry.register("ProductRepository", other)
        assert exc_info.value.name == "ProductRepository"
        assert registry.factories["ProductRepository"] is _factory

    def test_register_rejects_non_callable_factory(self) -> None:
        registry = RepositoryFactoryRegistry()
        with pytest.raises(TypeError, match="must be callable"):
            registry.register("ProductRepository", None)  # type: ignore[arg-type]
        assert not registry.has("ProductRepository")
        assert len(registry) == 0

    def test_errors_share_registry_base(self) -> None:
        assert issubclass(RepositoryAlreadyRegisteredError, RegistryError)
        assert issubclass(RepositoryNotRegisteredError, RegistryError)

    @given(st.lists(repository_names, unique=True, max_size=20))
    def test_every_registered_name_is_bound_once(self, names: list[str]) -> None:
        registry = RepositoryFactoryRegistry()
        for name in names:
            registry.register(name, _factory)
        for name in names:
            assert registry.has(name)
            with pytest.raises(RepositoryAlreadyRegisteredError):
                registry.register(name, _factory)
        assert len(registry) == len(names)


class TestRemove:
    def test_remove_deletes_binding(self) -> None:
        registry = RepositoryFactoryRegistry()
        registry.register("OrderRepository", _factory)
        registry.remove("OrderRepository")
        assert not registry.has("OrderRepository")

    def test_remove_then_register_again(self) -> None:
        registry = RepositoryFactoryRegistry()
        registry.register("OrderRepository", _factory)
        registry.remove("OrderRepository")
        registry.register("OrderRepository", _factory)
        assert registry.has("OrderRepository")

    @given(repository_names)
    def test_remove_unregistered_raises(self, name: str) -> None:
        registry = RepositoryFactoryRegistry()
        with pytest.raises(RepositoryNotRegisteredError):
            registry.remove(name)


class TestHasAndClear:
    def test_has_on_empty_registry(self) -> None:
        registry = RepositoryFactoryRegistry()
        assert registry.has("ProductRepository") is False
        assert "ProductRepository" not in registry

    @given(st.lists(repository_names, unique=True, min_size=1, max_size=20))
    def test_clear_unbinds_everything(self, names: list[str]) -> None:
        registry = RepositoryFactoryRegistry()
        for name in names:
            registry.register(name, _factory)
        registry.clear()
        assert not any(registry.has(name) for name in names)
        assert len(registry) == 0

    def test_registry_usable_after_clear(self) -> None:
        registry = RepositoryFactoryRegistry()
        registry.register("ProductRepository", _factory)
        registry.clear()
        registry.register("ProductRepository", _factory)
        assert registry.has("ProductRepository")

    def test_clear_replaces_mapping(self) -> None:
        registry = RepositoryFactoryRegistry()
        registry.register("ProductRepository", _factory)
        before = registry.factories
        registry.clear()
        assert registry.factories is not before
        assert "ProductRepository" in before
