from datetime import date

from src.container_payroll.container_payroll.core.enums import Collection


def test_add_team_keeps_pair_order(teams, fixed_now):
    team = teams.add(date(2024, 5, 6), "w2", "w1")

    assert team is not None
    assert team.workers == ("w2", "w1")
    assert team.created_at == fixed_now
    assert teams.get_by_date(date(2024, 5, 6)) == [team]


def test_worker_cannot_join_two_teams_on_same_date(teams, repository):
    day = date(2024, 5, 6)
    assert teams.add(day, "w1", "w2") is not None
    before = repository.get_all(Collection.TEAMS)

    assert teams.add(day, "w3", "w1") is None
    assert teams.add(day, "w2", "w4") is None

    assert repository.get_all(Collection.TEAMS) == before
    assert len(teams.get_by_date(day)) == 1


def test_same_worker_on_different_dates(teams):
    assert teams.add(date(2024, 5, 6), "w1", "w2") is not None
    assert teams.add(date(2024, 5, 7), "w1", "w3") is not None
    assert len(teams.list_all()) == 2


def test_pair_with_same_worker_is_refused(teams):
    assert teams.add(date(2024, 5, 6), "w1", "w1") is None
    assert teams.list_all() == []


def test_available_workers_excludes_assigned(teams, workers):
    day = date(2024, 5, 6)
    a = workers.add("Anna")
    b = workers.add("Piotr")
    c = workers.add("Ola")
    teams.add(day, a.id, b.id)

    assert teams.assigned_worker_ids(day) == {a.id, b.id}
    assert teams.available_workers(day, workers.list_all()) == [c]
    assert len(teams.available_workers(date(2024, 5, 7), workers.list_all())) == 3


def test_delete_team_frees_workers_for_that_date(teams):
    day = date(2024, 5, 6)
    team = teams.add(day, "w1", "w2")

    assert teams.delete(team.id) is True
    assert teams.get(team.id) is None
    assert teams.add(day, "w1", "w3") is not None


def test_add_team_fails_without_persisting_when_save_fails(teams, backend):
    backend.fail_writes = True

    assert teams.add(date(2024, 5, 6), "w1", "w2") is None
    assert teams.list_all() == []
