from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...core.constants import TEAM_SIZE


class PaymentCalculator(ABC):
    """Calculator interface (Strategy Pattern for container payments)."""

    @abstractmethod
    def payment(self, package_count: int) -> Decimal:
        raise NotImplementedError

    def payment_per_worker(self, payment: Decimal) -> Decimal:
        """Teams are always two people, so the split is always even."""
        return payment / TEAM_SIZE
