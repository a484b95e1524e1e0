"""
uowkit – Unit of Work over named, transaction-scoped repositories.

Import path convention::

    from uowkit import UnitOfWork, TransactionScope, Context
    from uowkit.kernel.errors import RepositoryNotRegisteredError
    from uowkit.adapters.sqlalchemy import SqlAlchemyTransactionSource
"""

from uowkit.application.uow import (
    RepositoryFactoryRegistry,
    TransactionScope,
    UnitOfWork,
    get_as,
    transactional,
)
from uowkit.kernel import Context, Deadline, RepositoryName, TransactionHandle, TransactionSource
from uowkit.kernel.errors import (
    InvalidRepositoryTypeError,
    RepositoryAlreadyRegisteredError,
    RepositoryNotRegisteredError,
    TransactionBeginError,
)

__version__ = "0.1.0"
__all__ = [
    "Context",
    "Deadline",
    "InvalidRepositoryTypeError",
    "RepositoryAlreadyRegisteredError",
    "RepositoryFactoryRegistry",
    "RepositoryName",
    "RepositoryNotRegisteredError",
    "TransactionBeginError",
    "TransactionHandle",
    "TransactionScope",
    "TransactionSource",
    "UnitOfWork",
    "__version__",
    "get_as",
    "transactional",
]
