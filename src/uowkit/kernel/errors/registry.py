"""Registry errors — repository registration and lookup failures."""

from __future__ import annotations

from typing import Any

from uowkit.kernel.errors.base import BaseError


class RegistryError(BaseError):
    """A repository name could not be registered, removed or resolved."""

    default_code = "registry_error"

    def __init__(self, name: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Repository {name!r} registry error", **kwargs)
        self.name = name


class RepositoryNotRegisteredError(RegistryError):
    """No factory is bound to the requested repository name."""

    default_code = "repository_not_registered"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(name, f"Repository {name!r} not registered", **kwargs)


class RepositoryAlreadyRegisteredError(RegistryError):
    """A factory is already bound to the repository name."""

    default_code = "repository_already_registered"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(name, f"Repository {name!r} already registered", **kwargs)


class InvalidRepositoryTypeError(BaseError):
    """The resolved repository is not an instance of the expected type."""

    default_code = "invalid_repository_type"

    def __init__(self, name: str, expected: type, actual: type, **kwargs: Any) -> None:
        super().__init__(
            f"Repository {name!r} is {actual.__name__!r}, expected {expected.__name__!r}",
            detail={"expected": expected.__name__, "actual": actual.__name__},
            **kwargs,
        )
        self.name = name
        self.expected = expected
        self.actual = actual


__all__ = [
    "InvalidRepositoryTypeError",
    "RegistryError",
    "RepositoryAlreadyRegisteredError",
    "RepositoryNotRegisteredError",
]
