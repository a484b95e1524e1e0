"""Testing fakes – in-memory transaction source (snapshot isolation)."""
from __future__ import annotations

import copy
from typing import Any

from uowkit.kernel.context import Context
from uowkit.kernel.ports import TransactionHandle, TransactionSource

Table = dict[Any, dict[str, Any]]


class InMemoryDatabase:
    """Committed state: table name → primary key → row dict."""

    def __init__(self) -> None:
        self.tables: dict[str, Table] = {}

    def table(self, name: str) -> Table:
        return self.tables.setdefault(name, {})


class InMemoryTransaction(TransactionHandle):
    """Works on a private deep copy of the database taken at begin.

    ``commit`` replaces the committed state with a copy of it (last writer
    wins, no conflict detection), so later writes through this handle never
    reach the database; ``rollback`` discards it.
    """

    def __init__(self, source: "InMemoryTransactionSource", ctx: Context) -> None:
        self._source = source
        self.ctx = ctx
        self.tables: dict[str, Table] = copy.deepcopy(source.database.tables)
        self.committed = False
        self.rolled_back = False

    @property
    def finished(self) -> bool:
        return self.committed or self.rolled_back

    def table(self, name: str) -> Table:
        return self.tables.setdefault(name, {})

    async def commit(self) -> None:
        if self.finished:
            return
        if self._source.commit_error is not None:
            raise self._source.commit_error
        self._source.database.tables = copy.deepcopy(self.tables)
        self.committed = True

    async def rollback(self) -> None:
        if self.finished:
            return
        if self._source.rollback_error is not None:
            raise self._source.rollback_error
        self.tables = {}
        self.rolled_back = True


class InMemoryTransactionSource(TransactionSource):
    """Fake :class:`TransactionSource` with failure injection.

    Usage::

        source = InMemoryTransactionSource(commit_error=RuntimeError("disk full"))
        uow = UnitOfWork(source)
        ...
        assert source.rollbacks == 1
    """

    def __init__(
        self,
        database: InMemoryDatabase | None = None,
        *,
        begin_error: BaseException | None = None,
        commit_error: BaseException | None = None,
        rollback_error: BaseException | None = None,
    ) -> None:
        self.database = database or InMemoryDatabase()
        self.begin_error = begin_error
        self.commit_error = commit_error
        self.rollback_error = rollback_error
        self.transactions: list[InMemoryTransaction] = []

    async def begin(self, ctx: Context) -> InMemoryTransaction:
        ctx.raise_if_expired()
        if self.begin_error is not None:
            raise self.begin_error
        tx = InMemoryTransaction(self, ctx)
        self.transactions.append(tx)
        return tx

    @property
    def commits(self) -> int:
        return sum(1 for tx in self.transactions if tx.committed)

    @property
    def rollbacks(self) -> int:
        return sum(1 for tx in self.transactions if tx.rolled_back)

    @property
    def open_transactions(self) -> int:
        return sum(1 for tx in self.transactions if not tx.finished)


__all__ = ["InMemoryDatabase", "InMemoryTransaction", "InMemoryTransactionSource"]
