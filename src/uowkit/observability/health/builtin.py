from __future__ import annotations

from uowkit.kernel.context import Context
from uowkit.kernel.ports import TransactionSource
from uowkit.observability.health.check import HealthCheck, HealthStatus

__all__ = ["TransactionSourceHealthCheck"]


class TransactionSourceHealthCheck(HealthCheck):
    """Checks that a transaction can be opened, then rolls it back."""

    def __init__(self, source: TransactionSource, name_: str = "database", timeout: float = 5.0) -> None:
        self._source = source
        self._name = name_
        self._timeout = timeout

    @property
    def name(self) -> str:
        return self._name

    async def check(self) -> HealthStatus:
        try:
            handle = await self._source.begin(Context.with_timeout(self._timeout))
            await handle.rollback()
            return HealthStatus(healthy=True)
        except Exception as exc:  # noqa: BLE001
            return HealthStatus(healthy=False, detail=str(exc))
