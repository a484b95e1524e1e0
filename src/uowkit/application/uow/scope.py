"""Application UoW – TransactionScope and typed lookup."""
from __future__ import annotations

from typing import Any, Mapping, TypeVar

from uowkit.kernel.errors import InvalidRepositoryTypeError, RepositoryNotRegisteredError
from uowkit.kernel.ports import RepositoryFactory, RepositoryName, TransactionHandle

T = TypeVar("T")


class TransactionScope:
    """Repository lookup bound to one open transaction.

    Every :meth:`get` call runs the factory again, so two lookups of the same
    name return two independent repositories sharing the same handle. Keep
    the returned object if a stable instance is needed.
    """

    def __init__(
        self,
        handle: TransactionHandle,
        factories: Mapping[RepositoryName, RepositoryFactory],
    ) -> None:
        self._handle = handle
        self._factories = factories

    @property
    def handle(self) -> TransactionHandle:
        return self._handle

    def get(self, name: str) -> Any:
        """Build the repository registered under *name* for this transaction.

        Raises ``RepositoryNotRegisteredError`` if *name* is not bound.
        """
        if name not in self._factories:
            raise RepositoryNotRegisteredError(name)
        return self._factories[RepositoryName(name)](self._handle)

    def get_as(self, name: str, cls: type[T]) -> T:
        """Like :meth:`get`, asserting the repository is an instance of *cls*.

        Raises ``InvalidRepositoryTypeError`` on a type mismatch.
        """
        repository = self.get(name)
        if not isinstance(repository, cls):
            raise InvalidRepositoryTypeError(name, expected=cls, actual=type(repository))
        return repository


def get_as(tx: TransactionScope, name: str, cls: type[T]) -> T:
    """Functional form of :meth:`TransactionScope.get_as`."""
    return tx.get_as(name, cls)


__all__ = ["TransactionScope", "get_as"]
