"""Observability – health checks."""
from uowkit.observability.health.builtin import TransactionSourceHealthCheck
from uowkit.observability.health.check import HealthCheck, HealthStatus

__all__ = ["HealthCheck", "HealthStatus", "TransactionSourceHealthCheck"]
