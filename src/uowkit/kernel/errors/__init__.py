"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── RegistryError                    (registry.py)
    │   ├── RepositoryNotRegisteredError
    │   └── RepositoryAlreadyRegisteredError
    ├── InvalidRepositoryTypeError       (registry.py)
    ├── InfrastructureError              (infrastructure.py)
    │   └── TransactionBeginError
    └── ConfigError                      (uowkit.config.validation)
"""

from uowkit.kernel.errors.base import BaseError
from uowkit.kernel.errors.infrastructure import InfrastructureError, TransactionBeginError
from uowkit.kernel.errors.registry import (
    InvalidRepositoryTypeError,
    RegistryError,
    RepositoryAlreadyRegisteredError,
    RepositoryNotRegisteredError,
)

__all__ = [
    "BaseError",
    "InfrastructureError",
    "InvalidRepositoryTypeError",
    "RegistryError",
    "RepositoryAlreadyRegisteredError",
    "RepositoryNotRegisteredError",
    "TransactionBeginError",
]
