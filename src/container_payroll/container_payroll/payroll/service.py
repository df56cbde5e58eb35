from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import format_iso_date
from ..common.money import to_json_number
from ..core.constants import UNKNOWN_TEAM_LABEL, UNKNOWN_WORKER_LABEL
from ..ledger.service import ContainerLedger
from ..teams.service import TeamAssignmentService
from ..workers.service import WorkerRegistry


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


class PayrollReportService:
    """Per-container payout rows and per-worker totals for a date range."""

    def __init__(self, ledger: ContainerLedger, teams: TeamAssignmentService, workers: WorkerRegistry):
        self._ledger = ledger
        self._teams = teams
        self._workers = workers

    def build_worker_report(
        self,
        *,
        start: date,
        end: date,
        worker_id: Optional[str] = None,
    ) -> ReportData:
        containers = self._ledger.history(worker_id=worker_id, start=start, end=end)
        teams = {t.id: t for t in self._teams.list_all()}
        names = {w.id: w.name for w in self._workers.list_all()}

        summary_map: dict[str, dict] = {}
        out_rows: list[dict] = []

        for c in containers:
            team = teams.get(c.team_id)
            member_ids = list(team.workers) if team else []
            out_rows.append(
                {
                    "container_id": c.id,
                    "date": format_iso_date(c.date),
                    "team": (
                        ", ".join(names.get(m) or UNKNOWN_WORKER_LABEL for m in member_ids)
                        if team
                        else UNKNOWN_TEAM_LABEL
                    ),
                    "package_count": c.package_count,
                    "payment": to_json_number(c.payment),
                    "payment_per_worker": to_json_number(c.payment_per_worker),
                }
            )

            for member in member_ids:
                if worker_id and member != worker_id:
                    continue
                s = summary_map.get(member)
                if not s:
                    s = {
                        "worker_id": member,
                        "name": names.get(member) or UNKNOWN_WORKER_LABEL,
                        "containers": 0,
                        "total": Decimal("0"),
                    }
                    summary_map[member] = s
                s["containers"] += 1
                s["total"] += c.payment_per_worker

        summary = sorted(summary_map.values(), key=lambda x: x["total"], reverse=True)
        for s in summary:
            s["total"] = to_json_number(s["total"])
        return ReportData(rows=out_rows, summary=summary)
