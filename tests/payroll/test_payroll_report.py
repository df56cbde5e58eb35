from datetime import date

from src.container_payroll.container_payroll.payroll.service import PayrollReportService


def test_report_rows_and_summary(workers, teams, ledger):
    day = date(2024, 5, 6)
    anna = workers.add("Anna")
    piotr = workers.add("Piotr")
    ola = workers.add("Ola")
    t1 = teams.add(day, anna.id, piotr.id)
    t2 = teams.add(date(2024, 5, 7), anna.id, ola.id)
    ledger.add(day, t1.id, 1500)
    ledger.add(date(2024, 5, 7), t2.id, 4500)

    report = PayrollReportService(ledger, teams, workers).build_worker_report(
        start=date(2024, 5, 1), end=date(2024, 5, 31)
    )

    assert [r["date"] for r in report.rows] == ["2024-05-07", "2024-05-06"]
    assert report.rows[1]["team"] == "Anna, Piotr"
    assert report.rows[1]["payment_per_worker"] == 42.5
    by_name = {s["name"]: s for s in report.summary}
    assert by_name["Anna"]["total"] == 105
    assert by_name["Anna"]["containers"] == 2
    assert by_name["Ola"]["total"] == 62.5
    assert by_name["Piotr"]["total"] == 42.5
    assert report.summary[0]["name"] == "Anna"


def test_report_resolves_deleted_worker_and_team(workers, teams, ledger):
    day = date(2024, 5, 6)
    anna = workers.add("Anna")
    piotr = workers.add("Piotr")
    t1 = teams.add(day, anna.id, piotr.id)
    t2 = teams.add(day, "w8", "w9")
    ledger.add(day, t1.id, 500)
    ledger.add(day, t2.id, 500)
    workers.delete(piotr.id)
    teams.delete(t2.id)

    report = PayrollReportService(ledger, teams, workers).build_worker_report(start=day, end=day)

    assert report.rows[0]["team"] == "Anna, Unknown worker"
    assert report.rows[1]["team"] == "Unknown team"
    assert {s["name"] for s in report.summary} == {"Anna", "Unknown worker"}


def test_report_for_single_worker(workers, teams, ledger):
    day = date(2024, 5, 6)
    anna = workers.add("Anna")
    piotr = workers.add("Piotr")
    team = teams.add(day, anna.id, piotr.id)
    ledger.add(day, team.id, 2000)

    report = PayrollReportService(ledger, teams, workers).build_worker_report(
        start=day, end=day, worker_id=piotr.id
    )

    assert len(report.rows) == 1
    assert report.summary == [{"worker_id": piotr.id, "name": "Piotr", "containers": 1, "total": 50}]
