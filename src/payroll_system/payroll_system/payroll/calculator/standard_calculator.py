from __future__ import annotations

from typing import Any

from ...common.money import round_money, to_decimal
from ...core.constants import OVERTIME_MULTIPLIER
from ..deductions import compute_deductions
from ..model import Payslip
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: regular hours at the base rate, overtime at 1.5x, minus SSS + Pag-IBIG.

    ``overtime_hours`` must already be the sum of per-day excess over 8 hours.
    Intermediate values keep full precision; only the returned fields are rounded.
    """

    def compute_payslip(self, hourly_rate: Any, total_hours_worked: Any, overtime_hours: Any) -> Payslip:
        rate = to_decimal(hourly_rate)
        hours_worked = to_decimal(total_hours_worked)
        overtime = to_decimal(overtime_hours)

        regular_hours = hours_worked - overtime
        regular_pay = regular_hours * rate
        overtime_amount = overtime * (rate * OVERTIME_MULTIPLIER)
        gross_pay = regular_pay + overtime_amount

        deductions = compute_deductions(gross_pay)
        net_pay = gross_pay - deductions.total

        return Payslip(
            hourly_rate=rate,
            hours_worked=hours_worked,
            overtime_hours=overtime,
            regular_hours=regular_hours,
            regular_pay=round_money(regular_pay),
            overtime_amount=round_money(overtime_amount),
            gross_pay=round_money(gross_pay),
            deductions=deductions,
            net_pay=round_money(net_pay),
        )


def compute_payslip(hourly_rate: Any, total_hours_worked: Any, overtime_hours: Any) -> Payslip:
    """Module-level shortcut for the default calculator."""
    return StandardPayrollCalculator().compute_payslip(hourly_rate, total_hours_worked, overtime_hours)
