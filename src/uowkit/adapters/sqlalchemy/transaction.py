"""SQLAlchemy adapter – SqlAlchemyTransaction handle."""
from __future__ import annotations

from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncTransaction

from uowkit.kernel.context import Context
from uowkit.kernel.ports import TransactionHandle
from uowkit.observability.logging import get_logger

_log = get_logger(__name__)


class SqlAlchemyTransaction(TransactionHandle):
    """One open transaction on a dedicated :class:`AsyncConnection`.

    Repositories run statements through :meth:`execute` or directly on
    :attr:`connection`. ``commit`` and ``rollback`` close the connection;
    once either has run, further calls do nothing.

    :meth:`execute` and :meth:`commit` are bounded by the deadline of *ctx*
    and raise ``DeadlineExceededError`` once it has passed, so an expired
    unit of work rolls back instead of committing. ``rollback`` is never
    bounded.
    """

    def __init__(
        self,
        connection: AsyncConnection,
        transaction: AsyncTransaction,
        ctx: Context | None = None,
    ) -> None:
        self.connection = connection
        self._transaction = transaction
        self._ctx = ctx if ctx is not None else Context.background()
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def ctx(self) -> Context:
        return self._ctx

    async def execute(self, statement: Any, params: dict[str, Any] | list[dict[str, Any]] | None = None) -> Any:
        """Execute *statement* (a SQL string or SQLAlchemy construct) in this transaction."""
        if isinstance(statement, str):
            statement = text(statement)
        return await self._ctx.run(self.connection.execute(statement, params))

    async def commit(self) -> None:
        if self._finished:
            return
        # An expired deadline leaves the transaction open for rollback.
        self._ctx.raise_if_expired()
        self._finished = True
        try:
            await self._ctx.run(self._transaction.commit())
            _log.debug("uow.tx.commit")
        finally:
            await self.connection.close()

    async def rollback(self) -> None:
        if self._finished:
            return
        self._finished = True
        try:
            await self._transaction.rollback()
            _log.debug("uow.tx.rollback")
        finally:
            await self.connection.close()


__all__ = ["SqlAlchemyTransaction"]
