from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import now_utc
from ..common.ids import generate_id
from ..core.enums import Collection
from ..payroll.calculator.base import PaymentCalculator
from ..payroll.calculator.tiered_calculator import TieredPaymentCalculator
from ..storage.repository import Repository, load_entities
from ..teams.service import TeamAssignmentService
from .model import Container

logger = logging.getLogger(__name__)


class ContainerLedger:
    """Use case: record processed containers and look them up.

    Containers are immutable once recorded; payments are computed here once.
    """

    def __init__(
        self,
        repository: Repository,
        teams: TeamAssignmentService,
        *,
        calculator: Optional[PaymentCalculator] = None,
        id_factory: Callable[[], str] = generate_id,
        clock=now_utc,
    ):
        self._repo = repository
        self._teams = teams
        self._calculator = calculator or TieredPaymentCalculator()
        self._new_id = id_factory
        self._clock = clock

    def get_all(self) -> list[Container]:
        return load_entities(Collection.CONTAINERS, self._repo.get_all(Collection.CONTAINERS), Container.from_record)

    def add(self, day: date, team_id: str, package_count: int) -> Optional[Container]:
        payment = self._calculator.payment(package_count)
        container = Container(
            id=self._new_id(),
            date=day,
            team_id=team_id,
            package_count=int(package_count),
            payment=payment,
            payment_per_worker=self._calculator.payment_per_worker(payment),
            created_at=self._clock(),
        )
        records = self._repo.get_all(Collection.CONTAINERS)
        records.append(container.to_record())
        if not self._repo.save(Collection.CONTAINERS, records):
            return None
        logger.info("Recorded container %s for team %s (%s packages)", container.id, team_id, package_count)
        return container

    def get_by_worker(self, worker_id: str) -> list[Container]:
        """Containers whose team includes the worker; deleted teams match nothing."""
        teams = {t.id: t for t in self._teams.list_all()}
        out: list[Container] = []
        for container in self.get_all():
            team = teams.get(container.team_id)
            if team and team.has_worker(worker_id):
                out.append(container)
        return out

    def get_by_date_range(self, start: date, end: date) -> list[Container]:
        return [c for c in self.get_all() if start <= c.date <= end]

    def history(
        self,
        *,
        worker_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[Container]:
        """Worker filter, then the date range when both ends are given; newest first."""
        containers = self.get_by_worker(worker_id) if worker_id else self.get_all()
        if start and end:
            containers = [c for c in containers if start <= c.date <= end]
        return sorted(containers, key=lambda c: c.date, reverse=True)
