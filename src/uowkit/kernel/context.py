"""Kernel – cancellation context passed through a unit of work."""
from __future__ import annotations

import asyncio
import dataclasses
from datetime import UTC, datetime, timedelta
from typing import Any, Awaitable, TypeVar

T = TypeVar("T")


class DeadlineExceededError(Exception):
    """Raised when the context deadline has passed."""


@dataclasses.dataclass(frozen=True)
class Deadline:
    """An absolute deadline derived from a timeout."""
    expires_at: datetime

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        return cls(expires_at=datetime.now(UTC) + timedelta(seconds=seconds))

    @property
    def remaining_seconds(self) -> float:
        return max(0.0, (self.expires_at - datetime.now(UTC)).total_seconds())

    @property
    def is_expired(self) -> bool:
        return datetime.now(UTC) >= self.expires_at


@dataclasses.dataclass(frozen=True)
class Context:
    """Deadline carrier handed to the transaction source and to the unit-of-work function.

    Cancellation itself is the task's own ``asyncio`` cancellation; a context
    only adds an optional deadline plus free-form values for the caller.
    """
    deadline: Deadline | None = None
    values: dict[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def background(cls) -> "Context":
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float, **values: Any) -> "Context":
        return cls(deadline=Deadline.after(seconds), values=values)

    @property
    def remaining_seconds(self) -> float | None:
        if self.deadline is None:
            return None
        return self.deadline.remaining_seconds

    def raise_if_expired(self) -> None:
        if self.deadline is not None and self.deadline.is_expired:
            raise DeadlineExceededError("Deadline exceeded")

    async def run(self, coro: Awaitable[T]) -> T:
        """Await *coro*, bounded by the deadline if one is set."""
        remaining = self.remaining_seconds
        if remaining is None:
            return await coro
        if remaining <= 0:
            if asyncio.iscoroutine(coro):
                coro.close()
            raise DeadlineExceededError("Deadline already exceeded")
        try:
            return await asyncio.wait_for(coro, timeout=remaining)
        except asyncio.TimeoutError:
            raise DeadlineExceededError("Deadline exceeded during execution") from None


__all__ = ["Context", "Deadline", "DeadlineExceededError"]
