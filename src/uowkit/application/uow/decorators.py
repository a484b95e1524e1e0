"""Application UoW – transactional decorator."""
from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from uowkit.application.uow.runner import UnitOfWork
from uowkit.application.uow.scope import TransactionScope
from uowkit.kernel.context import Context

F = TypeVar("F", bound=Callable[..., Any])


def transactional(uow_attribute: str = "_uow") -> Callable[[F], Any]:
    """Decorator: run an async method inside ``UnitOfWork.do``.

    The decorated method receives ``(self, ctx, tx, *args, **kwargs)``; callers
    invoke it as ``obj.method(ctx, *args, **kwargs)`` and get its return value
    once the transaction has committed. ``ctx`` may be ``None``.

    Example::

        class CheckoutService:
            def __init__(self, uow: UnitOfWork) -> None:
                self._uow = uow

            @transactional()
            async def place_order(self, ctx, tx, product_id, amount):
                ...

        await service.place_order(None, product_id, 3)
    """

    def decorator(func: F) -> Any:
        @functools.wraps(func)
        async def wrapper(self: Any, ctx: Context | None, *args: Any, **kwargs: Any) -> Any:
            uow: UnitOfWork | None = getattr(self, uow_attribute, None)
            if uow is None:
                raise AttributeError(
                    f"{type(self).__name__!r} has no unit of work at {uow_attribute!r}"
                )

            async def work(work_ctx: Context, tx: TransactionScope) -> Any:
                return await func(self, work_ctx, tx, *args, **kwargs)

            return await uow.do(work, ctx)

        return wrapper

    return decorator


__all__ = ["transactional"]
