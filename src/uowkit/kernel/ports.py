"""Kernel ports — the transactional resource a unit of work runs against."""

from __future__ import annotations

import abc
from typing import Any, Callable, NewType

from uowkit.kernel.context import Context

RepositoryName = NewType("RepositoryName", str)


class TransactionHandle(abc.ABC):
    """Port: one open transaction.

    Repositories receive the handle at construction time and use whatever
    statement-execution API the concrete adapter exposes.
    """

    @abc.abstractmethod
    async def commit(self) -> None: ...

    @abc.abstractmethod
    async def rollback(self) -> None: ...


class TransactionSource(abc.ABC):
    """Port: something that can open transactions (engine, pool, connection)."""

    @abc.abstractmethod
    async def begin(self, ctx: Context) -> TransactionHandle: ...


RepositoryFactory = Callable[[TransactionHandle], Any]


__all__ = ["RepositoryFactory", "RepositoryName", "TransactionHandle", "TransactionSource"]
