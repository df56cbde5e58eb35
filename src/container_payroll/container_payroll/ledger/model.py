from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from ..common.datetime_utils import format_iso_date, format_timestamp, parse_iso_date, parse_timestamp
from ..common.money import to_decimal, to_json_number


@dataclass(frozen=True)
class Container:
    """Domain entity: one processed shipping container.

    `payment` and `payment_per_worker` are fixed when the container is
    recorded and are never recomputed.
    """

    id: str
    date: date
    team_id: str
    package_count: int
    payment: Decimal
    payment_per_worker: Decimal
    created_at: datetime

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": format_iso_date(self.date),
            "teamId": self.team_id,
            "packageCount": self.package_count,
            "payment": to_json_number(self.payment),
            "paymentPerWorker": to_json_number(self.payment_per_worker),
            "createdAt": format_timestamp(self.created_at),
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Container":
        return cls(
            id=str(record["id"]),
            date=parse_iso_date(record["date"]),
            team_id=str(record["teamId"]),
            package_count=int(record["packageCount"]),
            payment=to_decimal(record["payment"]),
            payment_per_worker=to_decimal(record["paymentPerWorker"]),
            created_at=parse_timestamp(record["createdAt"]),
        )
