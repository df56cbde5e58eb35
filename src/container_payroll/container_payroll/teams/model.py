from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from ..common.datetime_utils import format_iso_date, format_timestamp, parse_iso_date, parse_timestamp


@dataclass(frozen=True)
class Team:
    """Domain entity: a date-scoped pair of workers.

    `workers` keeps the order the pair was created with.
    """

    id: str
    date: date
    workers: tuple[str, str]
    created_at: datetime

    def has_worker(self, worker_id: str) -> bool:
        return worker_id in self.workers

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": format_iso_date(self.date),
            "workers": list(self.workers),
            "createdAt": format_timestamp(self.created_at),
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Team":
        first, second = record["workers"]
        return cls(
            id=str(record["id"]),
            date=parse_iso_date(record["date"]),
            workers=(str(first), str(second)),
            created_at=parse_timestamp(record["createdAt"]),
        )
