"""Container Payroll package.

Workers are paired into daily two-person teams, teams process shipping
containers and each container's package count decides a tiered payment split
between the two team members. Organized by feature modules (workers, teams,
ledger, payroll) with a thin Flask controller layer over service/repository
layers.
"""
