"""Example: compute a payslip and a period run straight from the service layer (no Flask).

The first part needs no database: the calculator is a pure function.
"""

import importlib

from config import get_settings_module

from src.payroll_system.payroll_system.container import build_container
from src.payroll_system.payroll_system.payroll.calculator.standard_calculator import compute_payslip


def main():
    payslip = compute_payslip(hourly_rate=100, total_hours_worked=176, overtime_hours=16)
    print(payslip.to_dict())

    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    run = container.payroll_service.run_period(1)
    print(run.totals.to_dict())


if __name__ == "__main__":
    main()
