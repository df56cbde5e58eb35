from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..common.datetime_utils import format_timestamp, parse_timestamp


@dataclass(frozen=True)
class Worker:
    """Domain entity: Worker.

    Note: plain data object; storage goes through `to_record` / `from_record`.
    """

    id: str
    name: str
    created_at: datetime
    active: bool = True

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "active": self.active,
            "createdAt": format_timestamp(self.created_at),
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Worker":
        return cls(
            id=str(record["id"]),
            name=str(record.get("name", "")),
            active=bool(record.get("active", True)),
            created_at=parse_timestamp(record["createdAt"]),
        )
