"""Kernel – ports, context and error hierarchy shared by every layer."""
from uowkit.kernel.context import Context, Deadline, DeadlineExceededError
from uowkit.kernel.ports import RepositoryFactory, RepositoryName, TransactionHandle, TransactionSource

__all__ = [
    "Context",
    "Deadline",
    "DeadlineExceededError",
    "RepositoryFactory",
    "RepositoryName",
    "TransactionHandle",
    "TransactionSource",
]
