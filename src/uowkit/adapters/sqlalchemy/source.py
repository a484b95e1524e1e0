"""SQLAlchemy adapter – SqlAlchemyTransactionSource."""
from __future__ import annotations

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from uowkit.adapters.sqlalchemy.transaction import SqlAlchemyTransaction
from uowkit.config.settings import UnitOfWorkSettings
from uowkit.kernel.context import Context
from uowkit.kernel.ports import TransactionSource
from uowkit.observability.logging import get_logger

_log = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:  # noqa: ARG001
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class SqlAlchemyTransactionSource(TransactionSource):
    """Opens one connection + transaction per :meth:`begin` on an ``AsyncEngine``.

    ``begin_timeout`` (seconds) bounds the begin step when the caller's
    context carries no deadline of its own; ``0`` disables it. The caller's
    context is handed to the returned handle, which bounds statements and
    commit by its deadline.
    """

    def __init__(self, engine: AsyncEngine, *, begin_timeout: float = 0.0) -> None:
        self._engine = engine
        self._begin_timeout = begin_timeout
        if engine.dialect.name == "sqlite":
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    @classmethod
    def from_url(cls, database_url: str, *, begin_timeout: float = 0.0, **engine_kwargs: Any) -> "SqlAlchemyTransactionSource":
        return cls(create_async_engine(database_url, **engine_kwargs), begin_timeout=begin_timeout)

    @classmethod
    def from_settings(cls, settings: UnitOfWorkSettings) -> "SqlAlchemyTransactionSource":
        engine_kwargs: dict[str, Any] = {"echo": settings.echo}
        if settings.isolation_level:
            engine_kwargs["isolation_level"] = settings.isolation_level
        return cls.from_url(settings.database_url, begin_timeout=settings.begin_timeout, **engine_kwargs)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def begin(self, ctx: Context) -> SqlAlchemyTransaction:
        begin_ctx = ctx
        if ctx.deadline is None and self._begin_timeout > 0:
            begin_ctx = Context.with_timeout(self._begin_timeout, **ctx.values)

        connection = self._engine.connect()
        await begin_ctx.run(connection.start())
        try:
            transaction = connection.begin()
            await begin_ctx.run(transaction.start())
        except BaseException:
            await connection.close()
            raise
        _log.debug("uow.tx.begin", dialect=self._engine.dialect.name)
        return SqlAlchemyTransaction(connection, transaction, ctx)

    async def dispose(self) -> None:
        await self._engine.dispose()


__all__ = ["SqlAlchemyTransactionSource"]
