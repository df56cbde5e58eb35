from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import now_utc
from ..common.ids import generate_id
from ..core.enums import Collection
from ..storage.repository import Repository, load_entities
from ..workers.model import Worker
from .model import Team

logger = logging.getLogger(__name__)


class TeamAssignmentService:
    """Use case: pair workers into daily teams.

    A worker may belong to at most one team per date. The check re-reads the
    teams of that date on every add, which is only sound with a single writer.
    """

    def __init__(self, repository: Repository, *, id_factory: Callable[[], str] = generate_id, clock=now_utc):
        self._repo = repository
        self._new_id = id_factory
        self._clock = clock

    def list_all(self) -> list[Team]:
        return load_entities(Collection.TEAMS, self._repo.get_all(Collection.TEAMS), Team.from_record)

    def get(self, team_id: str) -> Optional[Team]:
        for team in self.list_all():
            if team.id == team_id:
                return team
        return None

    def get_by_date(self, day: date) -> list[Team]:
        return [t for t in self.list_all() if t.date == day]

    def assigned_worker_ids(self, day: date) -> set[str]:
        return {worker_id for team in self.get_by_date(day) for worker_id in team.workers}

    def available_workers(self, day: date, workers: Iterable[Worker]) -> list[Worker]:
        assigned = self.assigned_worker_ids(day)
        return [w for w in workers if w.id not in assigned]

    def add(self, day: date, worker_a: str, worker_b: str) -> Optional[Team]:
        if worker_a == worker_b:
            logger.warning("Refusing team with the same worker twice (%s)", worker_a)
            return None

        assigned = self.assigned_worker_ids(day)
        if worker_a in assigned or worker_b in assigned:
            logger.warning("Refusing team on %s: worker already assigned that day", day.isoformat())
            return None

        team = Team(id=self._new_id(), date=day, workers=(worker_a, worker_b), created_at=self._clock())
        records = self._repo.get_all(Collection.TEAMS)
        records.append(team.to_record())
        if not self._repo.save(Collection.TEAMS, records):
            return None
        logger.info("Created team %s on %s", team.id, day.isoformat())
        return team

    def delete(self, team_id: str) -> bool:
        """Unconditional removal; containers keep the dangling team id."""
        records = [r for r in self._repo.get_all(Collection.TEAMS) if r.get("id") != team_id]
        return self._repo.save(Collection.TEAMS, records)
