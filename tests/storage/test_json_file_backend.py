import pytest

from src.container_payroll.container_payroll.core.enums import Collection
from src.container_payroll.container_payroll.core.exceptions import PersistenceError
from src.container_payroll.container_payroll.storage.json_file_backend import JsonFileBackend
from src.container_payroll.container_payroll.storage.repository import Repository


def test_missing_file_reads_as_none(tmp_path):
    assert JsonFileBackend(tmp_path).read("workers") is None


def test_write_then_read(tmp_path):
    backend = JsonFileBackend(tmp_path / "data")
    backend.write("teams", "[]")

    assert backend.read("teams") == "[]"
    assert (tmp_path / "data" / "teams.json").read_text(encoding="utf-8") == "[]"
    assert [p.name for p in (tmp_path / "data").iterdir()] == ["teams.json"]


def test_write_into_unusable_directory_raises_persistence_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(PersistenceError):
        JsonFileBackend(blocker).write("workers", "[]")


def test_repository_over_files_survives_restart(tmp_path):
    repo = Repository(JsonFileBackend(tmp_path))
    repo.initialize()
    repo.save(Collection.WORKERS, [{"id": "a", "name": "Zoë"}])

    again = Repository(JsonFileBackend(tmp_path))
    again.initialize()

    assert again.get_all(Collection.WORKERS) == [{"id": "a", "name": "Zoë"}]
