"""Testing support – in-memory fakes for code built on ``UnitOfWork``."""

from uowkit.testing.fakes import InMemoryDatabase, InMemoryTransaction, InMemoryTransactionSource

__all__ = ["InMemoryDatabase", "InMemoryTransaction", "InMemoryTransactionSource"]
