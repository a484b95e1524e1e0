"""Application UnitOfWork – registry, transaction scope, runner and decorator."""
from uowkit.application.uow.registry import RepositoryFactoryRegistry
from uowkit.application.uow.scope import TransactionScope, get_as
from uowkit.application.uow.runner import UnitOfWork, WorkFn
from uowkit.application.uow.decorators import transactional

__all__ = [
    "RepositoryFactoryRegistry",
    "TransactionScope",
    "UnitOfWork",
    "WorkFn",
    "get_as",
    "transactional",
]
