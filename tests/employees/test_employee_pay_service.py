from __future__ import annotations

from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.core.enums import Role
from src.payroll_system.payroll_system.core.exceptions import NotFoundError, ValidationError
from src.payroll_system.payroll_system.employees.model import Employee
from src.payroll_system.payroll_system.employees.service import EmployeePayService


class FakeEmployeesRepo:
    def __init__(self, employees):
        self._employees = {e.user_id: e for e in employees}
        self.updated = None

    def get_by_id(self, user_id):
        return self._employees.get(user_id)

    def update_pay_rate(self, *, user_id, hourly_rate, salary):
        self.updated = {"user_id": user_id, "hourly_rate": hourly_rate, "salary": salary}
        return user_id in self._employees


EMPLOYEE = Employee(
    user_id=2,
    employee_id="EMP-0002",
    first_name="Maria",
    last_name="Santos",
    position="Cashier",
    role=Role.EMPLOYEE,
)


def test_set_hourly_rate_stores_160_hour_salary():
    repo = FakeEmployeesRepo([EMPLOYEE])

    salary = EmployeePayService(repo).set_hourly_rate(user_id=2, hourly_rate="112.50")

    assert salary == Decimal("18000")
    assert repo.updated == {"user_id": 2, "hourly_rate": Decimal("112.50"), "salary": Decimal("18000")}


@pytest.mark.parametrize("rate", ["-1", "abc", None, "nan"])
def test_set_hourly_rate_rejects_invalid_rate(rate):
    repo = FakeEmployeesRepo([EMPLOYEE])

    with pytest.raises(ValidationError):
        EmployeePayService(repo).set_hourly_rate(user_id=2, hourly_rate=rate)
    assert repo.updated is None


def test_set_hourly_rate_unknown_employee():
    with pytest.raises(NotFoundError):
        EmployeePayService(FakeEmployeesRepo([])).set_hourly_rate(user_id=9, hourly_rate=100)
