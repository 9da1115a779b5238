from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from src.payroll_system.payroll_system.attendance.model import AttendanceEntry
from src.payroll_system.payroll_system.core.enums import AttendanceStatus, PeriodStatus, Role
from src.payroll_system.payroll_system.core.exceptions import NotFoundError, ValidationError
from src.payroll_system.payroll_system.employees.model import Employee
from src.payroll_system.payroll_system.payroll.model import PayrollPeriod
from src.payroll_system.payroll_system.payroll.service import PayrollService, summarize


class FakePeriodsRepo:
    def __init__(self, periods=None):
        self._periods = {p.period_id: p for p in (periods or [])}
        self._next_id = max(self._periods, default=0) + 1

    def list_all(self):
        return sorted(self._periods.values(), key=lambda p: p.start_date, reverse=True)

    def get_by_id(self, period_id: int) -> Optional[PayrollPeriod]:
        return self._periods.get(period_id)

    def create(self, *, period_name, start_date, end_date, pay_date):
        period = PayrollPeriod(
            period_id=self._next_id,
            period_name=period_name,
            start_date=start_date,
            end_date=end_date,
            pay_date=pay_date,
        )
        self._periods[period.period_id] = period
        self._next_id += 1
        return period


class FakeEmployeesRepo:
    def __init__(self, employees):
        self._employees = {e.user_id: e for e in employees}

    def get_by_id(self, user_id: int) -> Optional[Employee]:
        return self._employees.get(user_id)

    def list_payroll_employees(self):
        paid = [e for e in self._employees.values() if e.is_active and e.role in (Role.EMPLOYEE, Role.MANAGER)]
        return sorted(paid, key=lambda e: (e.last_name, e.first_name))


class FakeAttendanceRepo:
    def __init__(self, entries):
        self._entries = entries
        self.calls = []

    def list_approved_in_range(self, *, start_date, end_date, user_id=None):
        self.calls.append({"start_date": start_date, "end_date": end_date, "user_id": user_id})
        return [e for e in self._entries if user_id is None or e.user_id == user_id]


def make_employee(user_id, last_name, *, hourly_rate=None, salary=None, role=Role.EMPLOYEE, is_active=True):
    return Employee(
        user_id=user_id,
        employee_id=f"EMP-{user_id:04d}",
        first_name="First",
        last_name=last_name,
        position="Staff",
        role=role,
        hourly_rate=hourly_rate,
        salary=salary,
        is_active=is_active,
    )


def make_entry(user_id, day, hours, status=AttendanceStatus.APPROVED):
    return AttendanceEntry(
        attendance_id=user_id * 100 + day,
        user_id=user_id,
        work_date=date(2026, 1, day),
        status=status,
        total_hours=Decimal(str(hours)),
    )


PERIOD = PayrollPeriod(
    period_id=1,
    period_name="January 2026 - 1st Half",
    start_date=date(2026, 1, 1),
    end_date=date(2026, 1, 15),
    pay_date=date(2026, 1, 20),
)


def build_service(employees, entries, periods=(PERIOD,)):
    return PayrollService(FakePeriodsRepo(list(periods)), FakeEmployeesRepo(employees), FakeAttendanceRepo(entries))


def test_run_period_computes_each_employee_and_orders_by_name():
    employees = [
        make_employee(1, "Santos", hourly_rate=Decimal("100")),
        make_employee(2, "Reyes", salary=Decimal("32000")),
        make_employee(3, "Admin", hourly_rate=Decimal("500"), role=Role.ADMIN),
        make_employee(4, "Inactive", hourly_rate=Decimal("500"), is_active=False),
    ]
    entries = [
        make_entry(1, 5, 10),
        make_entry(1, 6, 6),
        make_entry(2, 5, 8),
        make_entry(3, 5, 8),
    ]

    run = build_service(employees, entries).run_period(1)

    assert [r.last_name for r in run.employees] == ["Reyes", "Santos"]
    santos = run.employees[1].payslip
    # 14 regular hours + 2 overtime hours at 150
    assert santos.regular_pay == Decimal("1400")
    assert santos.overtime_amount == Decimal("300")
    assert santos.gross_pay == Decimal("1700")
    assert santos.deductions.pagibig == Decimal("34")
    assert santos.net_pay == Decimal("1700") - Decimal("135") - Decimal("34")

    reyes = run.employees[0]
    assert reyes.payslip.hourly_rate == Decimal("200")
    assert reyes.basic_salary == Decimal("32000")
    assert reyes.payslip.gross_pay == Decimal("1600")


def test_employee_without_attendance_gets_zero_payslip():
    run = build_service([make_employee(1, "Santos", hourly_rate=Decimal("100"))], []).run_period(1)

    slip = run.employees[0].payslip
    assert slip.gross_pay == 0
    assert slip.deductions.total == 0
    assert slip.net_pay == 0


def test_totals_are_sums_of_rounded_rows():
    # each regular pay is 1.005, which rounds to 1.01 per employee
    employees = [make_employee(i, f"E{i}", hourly_rate=Decimal("1.005")) for i in (1, 2)]
    entries = [make_entry(1, 2, 1), make_entry(2, 2, 1)]

    run = build_service(employees, entries).run_period(1)

    assert run.totals.total_gross == Decimal("2.02")
    assert run.totals.total_gross == sum(r.payslip.gross_pay for r in run.employees)
    assert run.totals.total_net == sum(r.payslip.net_pay for r in run.employees)
    assert run.totals.total_deductions == sum(r.payslip.deductions.total for r in run.employees)


def test_summarize_matches_reported_rows_exactly():
    employees = [make_employee(i, f"E{i}", hourly_rate=Decimal("97.37")) for i in range(1, 8)]
    entries = [make_entry(i, d, Decimal("8.75")) for i in range(1, 8) for d in range(1, 12)]

    run = build_service(employees, entries).run_period(1)

    totals = summarize(run.employees)
    assert totals == run.totals
    assert run.to_dict()["totals"]["totalNet"] == float(sum(r.payslip.net_pay for r in run.employees))
    assert run.totals.total_hours == Decimal("8.75") * 11 * 7


def test_run_period_unknown_period_raises():
    with pytest.raises(NotFoundError):
        build_service([], []).run_period(99)


def test_generate_payslip_includes_period_details():
    attendance = FakeAttendanceRepo([make_entry(1, 5, 9), make_entry(2, 5, 9)])
    svc = PayrollService(
        FakePeriodsRepo([PERIOD]),
        FakeEmployeesRepo([make_employee(1, "Santos", hourly_rate=Decimal("100"))]),
        attendance,
    )

    result = svc.generate_payslip(user_id=1, period_id=1)

    assert attendance.calls[-1]["user_id"] == 1
    assert result.period_name == "January 2026 - 1st Half"
    assert result.pay_date == date(2026, 1, 20)
    assert result.bonuses == 0
    assert result.payslip.overtime_hours == Decimal("1")
    data = result.to_dict()
    assert data["gross_pay"] == 950.0
    assert data["pay_date"] == "2026-01-20"
    assert data["deduction_breakdown"] == {"sss": 135.0, "pagibig": 9.5, "total": 144.5}


def test_generate_payslip_unknown_employee_raises():
    with pytest.raises(NotFoundError):
        build_service([], []).generate_payslip(user_id=5, period_id=1)


def test_create_period_validates_name_and_dates():
    svc = build_service([], [], periods=())

    with pytest.raises(ValidationError):
        svc.create_period(period_name="  ", start_date=date(2026, 2, 1), end_date=date(2026, 2, 15))
    with pytest.raises(ValidationError):
        svc.create_period(period_name="Feb", start_date=date(2026, 2, 15), end_date=date(2026, 2, 1))

    period = svc.create_period(
        period_name=" February 2026 ",
        start_date=date(2026, 2, 1),
        end_date=date(2026, 2, 15),
        pay_date=date(2026, 2, 20),
    )
    assert period.period_name == "February 2026"
    assert period.status == PeriodStatus.OPEN
    assert svc.list_periods() == [period]
