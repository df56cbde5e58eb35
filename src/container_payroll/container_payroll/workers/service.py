from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Optional

from ..common.datetime_utils import now_utc
from ..common.ids import generate_id
from ..core.enums import Collection
from ..storage.repository import Repository, load_entities
from .model import Worker

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"name", "active"})


class WorkerRegistry:
    """Use case: manage worker records.

    Names are trusted as given; the HTTP layer validates them.
    """

    def __init__(self, repository: Repository, *, id_factory: Callable[[], str] = generate_id, clock=now_utc):
        self._repo = repository
        self._new_id = id_factory
        self._clock = clock

    def list_all(self) -> list[Worker]:
        return load_entities(Collection.WORKERS, self._repo.get_all(Collection.WORKERS), Worker.from_record)

    def get(self, worker_id: str) -> Optional[Worker]:
        for worker in self.list_all():
            if worker.id == worker_id:
                return worker
        return None

    def add(self, name: str) -> Optional[Worker]:
        worker = Worker(id=self._new_id(), name=name, active=True, created_at=self._clock())
        records = self._repo.get_all(Collection.WORKERS)
        records.append(worker.to_record())
        if not self._repo.save(Collection.WORKERS, records):
            return None
        logger.info("Added worker %s", worker.id)
        return worker

    def update(self, worker_id: str, **fields: Any) -> bool:
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            logger.warning("Refusing worker update with unsupported fields: %s", sorted(unknown))
            return False

        if "name" in fields and not isinstance(fields["name"], str):
            return False
        if "active" in fields and not isinstance(fields["active"], bool):
            return False

        records = self._repo.get_all(Collection.WORKERS)
        for index, record in enumerate(records):
            if record.get("id") == worker_id:
                break
        else:
            return False

        # Other records are written back untouched, even ones that no longer parse.
        merged = load_entities(Collection.WORKERS, [record], Worker.from_record)
        if not merged:
            return False
        records[index] = dataclasses.replace(merged[0], **fields).to_record()
        return self._repo.save(Collection.WORKERS, records)

    def delete(self, worker_id: str) -> bool:
        """Remove the worker; teams that reference it keep the dangling id."""
        records = [r for r in self._repo.get_all(Collection.WORKERS) if r.get("id") != worker_id]
        return self._repo.save(Collection.WORKERS, records)
