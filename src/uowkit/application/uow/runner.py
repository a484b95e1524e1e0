"""Application UoW – UnitOfWork runner.

Lifecycle of one :meth:`UnitOfWork.do` call::

    Idle ─begin fails──────────────────────────────▶ BeginFailed
      │
      ▼
    Begun ─▶ Running ─fn ok──▶ Committing ─▶ Committed
                   └─fn raises─▶ RollingBack ─▶ RolledBack

A rollback is attempted on every exit path once the transaction has begun,
unless the commit already succeeded.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

from uowkit.application.uow.registry import RepositoryFactoryRegistry
from uowkit.application.uow.scope import TransactionScope
from uowkit.kernel.context import Context
from uowkit.kernel.errors import TransactionBeginError
from uowkit.kernel.ports import RepositoryFactory, TransactionHandle, TransactionSource
from uowkit.observability.logging import get_logger

R = TypeVar("R")

WorkFn = Callable[[Context, TransactionScope], Awaitable[R]]

_log = get_logger(__name__)


class UnitOfWork:
    """Run async functions atomically against repositories bound to one transaction.

    Example::

        uow = UnitOfWork(SqlAlchemyTransactionSource.from_url(url))
        uow.register("products", ProductRepository)

        async def restock(ctx: Context, tx: TransactionScope) -> None:
            products = tx.get_as("products", ProductRepository)
            await products.add_stock(product_id, 10)

        await uow.do(restock)
    """

    def __init__(self, source: TransactionSource) -> None:
        self._source = source
        self._registry = RepositoryFactoryRegistry()

    @property
    def source(self) -> TransactionSource:
        return self._source

    @property
    def registry(self) -> RepositoryFactoryRegistry:
        return self._registry

    def register(self, name: str, factory: RepositoryFactory) -> None:
        self._registry.register(name, factory)

    def remove(self, name: str) -> None:
        self._registry.remove(name)

    def has(self, name: str) -> bool:
        return self._registry.has(name)

    def clear(self) -> None:
        self._registry.clear()

    async def do(self, fn: WorkFn[R], ctx: Context | None = None) -> R:
        """Execute *fn* inside a new transaction and return its result.

        The transaction commits when *fn* returns and rolls back when it
        raises. Exceptions from *fn* and from commit propagate unchanged; a
        failing begin is raised as ``TransactionBeginError``.
        """
        ctx = ctx if ctx is not None else Context.background()
        try:
            handle = await self._source.begin(ctx)
        except Exception as exc:
            raise TransactionBeginError(exc) from exc

        try:
            result = await fn(ctx, TransactionScope(handle, self._registry.factories))
            await handle.commit()
        except BaseException as exc:
            await self._rollback(handle, exc)
            raise
        return result

    async def _rollback(self, handle: TransactionHandle, original: BaseException) -> None:
        """Roll back without masking *original*.

        A rollback ``Exception`` is logged and attached to *original* as a
        note. A ``BaseException`` from rollback (e.g. ``CancelledError``)
        propagates in place of *original*, which stays reachable as its
        ``__context__``.
        """
        try:
            await handle.rollback()
        except Exception as rollback_exc:  # noqa: BLE001
            _log.warning(
                "uow.rollback_failed",
                error=repr(rollback_exc),
                original_error=repr(original),
            )
            original.add_note(f"rollback also failed: {rollback_exc!r}")


__all__ = ["UnitOfWork", "WorkFn"]
