from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_DATA_DIR
from .core.enums import StorageBackendKind
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .ledger.service import ContainerLedger
from .payroll.calculator.base import PaymentCalculator
from .payroll.calculator.tiered_calculator import TieredPaymentCalculator
from .payroll.service import PayrollReportService
from .storage.backend import StorageBackend
from .storage.json_file_backend import JsonFileBackend
from .storage.memory_backend import MemoryBackend
from .storage.mysql_backend import MySQLBackend
from .storage.repository import Repository
from .teams.service import TeamAssignmentService
from .workers.service import WorkerRegistry


@dataclass(frozen=True)
class ServiceContainer:
    repository: Repository
    calculator: PaymentCalculator

    worker_registry: WorkerRegistry
    team_service: TeamAssignmentService
    container_ledger: ContainerLedger
    payroll_report_service: PayrollReportService

    def close(self) -> None:
        self.repository.close()


def build_backend(
    kind: str,
    *,
    data_dir: str = DEFAULT_DATA_DIR,
    db_config: Optional[dict] = None,
    auto_init_db: bool = False,
) -> StorageBackend:
    kind = StorageBackendKind(str(kind).lower())
    if kind == StorageBackendKind.MEMORY:
        return MemoryBackend()
    if kind == StorageBackendKind.JSON:
        return JsonFileBackend(data_dir)

    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
    if auto_init_db:
        apply_schema(conn)
    return MySQLBackend(conn)


def build_container(
    *,
    backend: Optional[StorageBackend] = None,
    storage_backend: str = StorageBackendKind.JSON.value,
    data_dir: str = DEFAULT_DATA_DIR,
    db_config: Optional[dict] = None,
    auto_init_db: bool = False,
    calculator: Optional[PaymentCalculator] = None,
) -> ServiceContainer:
    if backend is None:
        backend = build_backend(storage_backend, data_dir=data_dir, db_config=db_config, auto_init_db=auto_init_db)

    repository = Repository(backend)
    repository.initialize()

    calculator = calculator or TieredPaymentCalculator()
    worker_registry = WorkerRegistry(repository)
    team_service = TeamAssignmentService(repository)
    container_ledger = ContainerLedger(repository, team_service, calculator=calculator)
    payroll_report_service = PayrollReportService(container_ledger, team_service, worker_registry)

    return ServiceContainer(
        repository=repository,
        calculator=calculator,
        worker_registry=worker_registry,
        team_service=team_service,
        container_ledger=container_ledger,
        payroll_report_service=payroll_report_service,
    )
