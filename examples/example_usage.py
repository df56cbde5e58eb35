"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the services.
"""

from datetime import date

from src.container_payroll.container_payroll.container import build_container


def main():
    container = build_container(storage_backend="memory")

    anna = container.worker_registry.add("Anna")
    piotr = container.worker_registry.add("Piotr")
    team = container.team_service.add(date(2024, 5, 6), anna.id, piotr.id)
    recorded = container.container_ledger.add(date(2024, 5, 6), team.id, 3450)

    print(recorded.payment, recorded.payment_per_worker)
    report = container.payroll_report_service.build_worker_report(start=date(2024, 5, 1), end=date(2024, 5, 31))
    print(report.summary)


if __name__ == "__main__":
    main()
