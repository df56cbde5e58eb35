from __future__ import annotations

import itertools
from datetime import datetime, timezone

import pytest

from src.container_payroll.container_payroll.core.exceptions import PersistenceError
from src.container_payroll.container_payroll.ledger.service import ContainerLedger
from src.container_payroll.container_payroll.storage.memory_backend import MemoryBackend
from src.container_payroll.container_payroll.storage.repository import Repository
from src.container_payroll.container_payroll.teams.service import TeamAssignmentService
from src.container_payroll.container_payroll.workers.service import WorkerRegistry


class FlakyBackend(MemoryBackend):
    """Memory backend whose writes can be switched to fail."""

    def __init__(self):
        super().__init__()
        self.fail_writes = False

    def write(self, key: str, payload: str) -> None:
        if self.fail_writes:
            raise PersistenceError("disk full")
        super().write(key, payload)


@pytest.fixture
def fixed_now():
    return datetime(2024, 5, 6, 8, 30, 0, 123000, tzinfo=timezone.utc)


@pytest.fixture
def backend():
    return FlakyBackend()


@pytest.fixture
def repository(backend):
    repo = Repository(backend)
    repo.initialize()
    return repo


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id{next(counter)}"


@pytest.fixture
def workers(repository, id_factory, fixed_now):
    return WorkerRegistry(repository, id_factory=id_factory, clock=lambda: fixed_now)


@pytest.fixture
def teams(repository, id_factory, fixed_now):
    return TeamAssignmentService(repository, id_factory=id_factory, clock=lambda: fixed_now)


@pytest.fixture
def ledger(repository, teams, id_factory, fixed_now):
    return ContainerLedger(repository, teams, id_factory=id_factory, clock=lambda: fixed_now)
