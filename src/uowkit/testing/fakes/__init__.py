"""Testing fakes – in-memory doubles for kernel ports."""
from uowkit.testing.fakes.transaction import (
    InMemoryDatabase,
    InMemoryTransaction,
    InMemoryTransactionSource,
)

__all__ = ["InMemoryDatabase", "InMemoryTransaction", "InMemoryTransactionSource"]
