from __future__ import annotations

from collections import defaultdict
from dataclasses import replace
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.aggregator import aggregate_attendance
from ..attendance.model import AttendanceEntry
from ..attendance.repository import AttendanceRepository
from ..common.money import ZERO, to_decimal
from ..common.validators import require_date_order, require_non_empty
from ..core.exceptions import NotFoundError
from ..core.logging_config import get_logger
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import EmployeePayslip, PayProfile, PayrollPeriod, PayrollRun, PayrollTotals
from .repository import PayrollPeriodRepository

logger = get_logger("payroll.service")


def summarize(rows: Iterable[EmployeePayslip]) -> PayrollTotals:
    """Period totals as the sum of each employee's already-rounded figures.

    Totals are never recomputed from unrounded sums, so they always match the
    rows a reader sees.
    """
    total_gross = total_deductions = total_net = total_hours = total_overtime = ZERO
    for row in rows:
        slip = row.payslip
        total_gross += slip.gross_pay
        total_deductions += slip.deductions.total
        total_net += slip.net_pay
        total_hours += slip.hours_worked
        total_overtime += slip.overtime_amount
    return PayrollTotals(
        total_gross=total_gross,
        total_deductions=total_deductions,
        total_net=total_net,
        total_hours=total_hours,
        total_overtime=total_overtime,
    )


class PayrollService:
    def __init__(
        self,
        periods: PayrollPeriodRepository,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._periods = periods
        self._employees = employees
        self._attendance = attendance
        self._calculator = calculator or StandardPayrollCalculator()

    def list_periods(self) -> Sequence[PayrollPeriod]:
        return self._periods.list_all()

    def get_period(self, period_id: int) -> PayrollPeriod:
        period = self._periods.get_by_id(int(period_id))
        if not period:
            raise NotFoundError("Period not found")
        return period

    def create_period(
        self,
        *,
        period_name: str,
        start_date: date,
        end_date: date,
        pay_date: Optional[date] = None,
    ) -> PayrollPeriod:
        name = require_non_empty(period_name, "period_name")
        require_date_order(start_date, end_date)

        period = self._periods.create(period_name=name, start_date=start_date, end_date=end_date, pay_date=pay_date)
        logger.info("Created payroll period %s (%s..%s)", period.period_id, start_date, end_date)
        return period

    def calculate(self, employee: Employee, entries: Iterable[AttendanceEntry], period: PayrollPeriod) -> EmployeePayslip:
        profile = PayProfile(hourly_rate=employee.hourly_rate, basic_monthly_salary=employee.salary)
        aggregate = aggregate_attendance(entries, start=period.start_date, end=period.end_date)
        payslip = self._calculator.compute_payslip(
            profile.effective_hourly_rate,
            aggregate.total_hours_worked,
            aggregate.overtime_hours,
        )
        return EmployeePayslip(
            user_id=employee.user_id,
            employee_id=employee.employee_id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            position=employee.position,
            basic_salary=to_decimal(employee.salary),
            payslip=payslip,
        )

    def run_period(self, period_id: int) -> PayrollRun:
        period = self.get_period(period_id)
        employees = self._employees.list_payroll_employees()

        entries_by_user: dict[int, list[AttendanceEntry]] = defaultdict(list)
        for entry in self._attendance.list_approved_in_range(start_date=period.start_date, end_date=period.end_date):
            entries_by_user[entry.user_id].append(entry)

        rows = [self.calculate(e, entries_by_user.get(e.user_id, []), period) for e in employees]
        totals = summarize(rows)

        logger.info(
            "Payroll run for period %s: %d employees, total net %s",
            period.period_id,
            len(rows),
            totals.total_net,
        )
        return PayrollRun(period=period, employees=rows, totals=totals)

    def generate_payslip(self, *, user_id: int, period_id: int) -> EmployeePayslip:
        period = self.get_period(period_id)

        employee = self._employees.get_by_id(int(user_id))
        if not employee:
            raise NotFoundError("Employee not found")

        entries = self._attendance.list_approved_in_range(
            start_date=period.start_date,
            end_date=period.end_date,
            user_id=employee.user_id,
        )
        row = self.calculate(employee, entries, period)

        logger.info("Generated payslip for user_id=%s period_id=%s", employee.user_id, period.period_id)
        return replace(row, period_name=period.period_name, pay_date=period.pay_date)
