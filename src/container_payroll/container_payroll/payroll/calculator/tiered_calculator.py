from __future__ import annotations

from decimal import Decimal
from typing import Sequence, Tuple

from ...core.constants import (
    DEFAULT_PAYMENT_TIERS,
    DEFAULT_STEP_AMOUNT,
    DEFAULT_STEP_SIZE,
    DEFAULT_STEP_THRESHOLD,
)
from .base import PaymentCalculator

Tier = Tuple[int, Decimal]


class TieredPaymentCalculator(PaymentCalculator):
    """Flat amounts per package-count bracket, then a fixed step per extra thousand.

    With the default table: <1000 -> 60, <2000 -> 85, <3000 -> 100,
    >=3000 -> 100 + 25 * floor((count - 3000) / 1000).
    """

    def __init__(
        self,
        tiers: Sequence[Tier] = DEFAULT_PAYMENT_TIERS,
        *,
        step_threshold: int = DEFAULT_STEP_THRESHOLD,
        step_size: int = DEFAULT_STEP_SIZE,
        step_amount: Decimal = DEFAULT_STEP_AMOUNT,
    ):
        if not tiers:
            raise ValueError("at least one tier is required")
        self._tiers = sorted(((int(lo), Decimal(amount)) for lo, amount in tiers), key=lambda t: t[0])
        self._step_threshold = int(step_threshold)
        self._step_size = int(step_size)
        self._step_amount = Decimal(step_amount)

    def payment(self, package_count: int) -> Decimal:
        count = int(package_count)
        if count >= self._step_threshold:
            steps = (count - self._step_threshold) // self._step_size
            return self._flat_amount(self._step_threshold) + self._step_amount * steps
        return self._flat_amount(count)

    def _flat_amount(self, count: int) -> Decimal:
        amount = self._tiers[0][1]
        for lower, tier_amount in self._tiers:
            if count < lower:
                break
            amount = tier_amount
        return amount


_default = TieredPaymentCalculator()


def calculate_payment(package_count: int) -> Decimal:
    """Payment for one container with the default tier table."""
    return _default.payment(package_count)
