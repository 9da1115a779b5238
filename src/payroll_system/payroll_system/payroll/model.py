from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..common.datetime_utils import format_iso_date
from ..common.money import ZERO, to_decimal
from ..core.constants import MONTHLY_HOURS
from ..core.enums import PeriodStatus
from .deductions import DeductionBreakdown


@dataclass(frozen=True)
class PayProfile:
    """Employee pay profile.

    ``hourly_rate`` wins when set; otherwise it is derived from the basic monthly
    salary over 160 hours. Both missing gives a rate of 0.
    """

    hourly_rate: Optional[Decimal] = None
    basic_monthly_salary: Optional[Decimal] = None

    @property
    def effective_hourly_rate(self) -> Decimal:
        rate = to_decimal(self.hourly_rate)
        if rate:
            return rate
        return to_decimal(self.basic_monthly_salary) / MONTHLY_HOURS

    @staticmethod
    def monthly_salary_for(hourly_rate: Any) -> Decimal:
        return to_decimal(hourly_rate) * MONTHLY_HOURS


@dataclass(frozen=True)
class Payslip:
    """Immutable result of one calculation. Money fields are rounded to cents."""

    hourly_rate: Decimal
    hours_worked: Decimal
    overtime_hours: Decimal
    regular_hours: Decimal
    regular_pay: Decimal
    overtime_amount: Decimal
    gross_pay: Decimal
    deductions: DeductionBreakdown
    net_pay: Decimal

    def to_dict(self) -> dict:
        return {
            "hourly_rate": float(self.hourly_rate),
            "hours_worked": float(self.hours_worked),
            "overtime_hours": float(self.overtime_hours),
            "regular_hours": float(self.regular_hours),
            "regular_pay": float(self.regular_pay),
            "overtime_amount": float(self.overtime_amount),
            "gross_pay": float(self.gross_pay),
            "deductions": float(self.deductions.total),
            "deduction_breakdown": self.deductions.to_dict(),
            "net_pay": float(self.net_pay),
        }


@dataclass(frozen=True)
class PayrollPeriod:
    period_id: int
    period_name: str
    start_date: date
    end_date: date
    pay_date: Optional[date]
    status: PeriodStatus = PeriodStatus.OPEN

    def to_dict(self) -> dict:
        return {
            "period_id": self.period_id,
            "period_name": self.period_name,
            "start_date": format_iso_date(self.start_date),
            "end_date": format_iso_date(self.end_date),
            "pay_date": format_iso_date(self.pay_date),
            "status": self.status.value,
        }


@dataclass(frozen=True)
class EmployeePayslip:
    """Payslip plus the pass-through identity fields shown to the reader."""

    user_id: int
    employee_id: Optional[str]
    first_name: str
    last_name: str
    position: Optional[str]
    basic_salary: Decimal
    payslip: Payslip
    period_name: Optional[str] = None
    pay_date: Optional[date] = None
    bonuses: Decimal = ZERO

    def to_dict(self) -> dict:
        data = {
            "user_id": self.user_id,
            "employee_id": self.employee_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "position": self.position,
            "basic_salary": float(self.basic_salary),
        }
        data.update(self.payslip.to_dict())
        if self.period_name is not None:
            data["period_name"] = self.period_name
            data["pay_date"] = format_iso_date(self.pay_date)
            data["bonuses"] = float(self.bonuses)
        return data


@dataclass(frozen=True)
class PayrollTotals:
    total_gross: Decimal = ZERO
    total_deductions: Decimal = ZERO
    total_net: Decimal = ZERO
    total_hours: Decimal = ZERO
    total_overtime: Decimal = ZERO

    def to_dict(self) -> dict:
        return {
            "totalGross": float(self.total_gross),
            "totalDeductions": float(self.total_deductions),
            "totalNet": float(self.total_net),
            "totalHours": float(self.total_hours),
            "totalOvertime": float(self.total_overtime),
        }


@dataclass(frozen=True)
class PayrollRun:
    period: PayrollPeriod
    employees: list[EmployeePayslip] = field(default_factory=list)
    totals: PayrollTotals = field(default_factory=PayrollTotals)

    def to_dict(self) -> dict:
        return {
            "period": self.period.to_dict(),
            "employees": [e.to_dict() for e in self.employees],
            "totals": self.totals.to_dict(),
        }
