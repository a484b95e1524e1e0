"""Config settings – Settings base class and UnitOfWorkSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from uowkit.config.validation import InvalidSettingValueError

ISOLATION_LEVELS = frozenset(
    {"", "AUTOCOMMIT", "READ UNCOMMITTED", "READ COMMITTED", "REPEATABLE READ", "SERIALIZABLE"}
)


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class UnitOfWorkSettings(Settings):
    """Connection settings for the SQLAlchemy transaction source.

    Loaded from ``UOW_DATABASE_URL``, ``UOW_ECHO``, ``UOW_ISOLATION_LEVEL``
    and ``UOW_BEGIN_TIMEOUT``. A ``begin_timeout`` of ``0`` means no limit.
    """

    _prefix: ClassVar[str] = "UOW"

    database_url: str
    echo: bool = False
    isolation_level: str = ""
    begin_timeout: float = 0.0

    def _validate(self) -> None:
        if not self.database_url:
            raise InvalidSettingValueError("database_url", self.database_url, "must not be empty")
        if self.begin_timeout < 0:
            raise InvalidSettingValueError("begin_timeout", self.begin_timeout, "must be >= 0")
        self.isolation_level = self.isolation_level.upper()
        if self.isolation_level not in ISOLATION_LEVELS:
            raise InvalidSettingValueError(
                "isolation_level", self.isolation_level, f"expected one of {sorted(ISOLATION_LEVELS)}"
            )


__all__ = ["ISOLATION_LEVELS", "Settings", "UnitOfWorkSettings"]
