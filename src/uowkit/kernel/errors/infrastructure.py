"""Infrastructure errors — failures of the underlying transactional resource."""

from __future__ import annotations

from typing import Any

from uowkit.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a caller mistake."""

    default_code = "infrastructure_error"


class TransactionBeginError(InfrastructureError):
    """The transaction source failed to open a new transaction.

    The original exception is available as :attr:`cause` (and ``__cause__``).
    """

    default_code = "transaction_begin_error"

    def __init__(self, cause: BaseException, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Could not begin transaction: {cause}", cause=cause, **kwargs)


__all__ = ["InfrastructureError", "TransactionBeginError"]
