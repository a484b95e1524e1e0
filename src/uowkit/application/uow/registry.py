"""Application UoW – RepositoryFactoryRegistry."""
from __future__ import annotations

from uowkit.kernel.errors import RepositoryAlreadyRegisteredError, RepositoryNotRegisteredError
from uowkit.kernel.ports import RepositoryFactory, RepositoryName


class RepositoryFactoryRegistry:
    """Name → repository factory bindings shared by every transaction of one unit of work.

    There is no overwrite: a name must be removed before it can be bound
    again. The registry does no locking, so bindings should not be mutated
    while transactions are in flight.

    Example::

        registry = RepositoryFactoryRegistry()
        registry.register("products", ProductRepository)
        "products" in registry  # True
    """

    def __init__(self) -> None:
        self._factories: dict[RepositoryName, RepositoryFactory] = {}

    @property
    def factories(self) -> dict[RepositoryName, RepositoryFactory]:
        """The live mapping (not a copy)."""
        return self._factories

    def register(self, name: str, factory: RepositoryFactory) -> None:
        """Bind *factory* to *name*.

        Raises ``RepositoryAlreadyRegisteredError`` if *name* is already bound
        and ``TypeError`` if *factory* is not callable.
        """
        if name in self._factories:
            raise RepositoryAlreadyRegisteredError(name)
        if not callable(factory):
            raise TypeError(f"Repository factory for '{name}' must be callable, got {type(factory).__name__!r}")
        self._factories[RepositoryName(name)] = factory

    def remove(self, name: str) -> None:
        """Delete the binding for *name*.

        Raises ``RepositoryNotRegisteredError`` if *name* is not bound.
        """
        if name not in self._factories:
            raise RepositoryNotRegisteredError(name)
        del self._factories[RepositoryName(name)]

    def has(self, name: str) -> bool:
        return name in self._factories

    def clear(self) -> None:
        """Drop every binding; the registry stays usable."""
        self._factories = {}

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)


__all__ = ["RepositoryFactoryRegistry"]
