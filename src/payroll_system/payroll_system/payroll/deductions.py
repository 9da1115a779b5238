"""Statutory deduction schedule (Philippine SSS, Pag-IBIG, PhilHealth, withholding tax).

Bracket tables are kept as ordered data and consulted first-match-wins in
ascending order, so every boundary value can be audited and tested on its own.

Only SSS and Pag-IBIG make up the active deduction total. PhilHealth and
withholding tax are available as standalone lookups but are not added to
``DeductionBreakdown.total``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Sequence

from ..common.money import ZERO, round_money, to_decimal

# (upper bound, exclusive) -> employee contribution
SSS_TABLE: Sequence[tuple[Decimal, Decimal]] = (
    (Decimal("3250"), Decimal("135.00")),
    (Decimal("3750"), Decimal("157.50")),
    (Decimal("4250"), Decimal("180.00")),
    (Decimal("4750"), Decimal("202.50")),
    (Decimal("5250"), Decimal("225.00")),
    (Decimal("5750"), Decimal("247.50")),
    (Decimal("6250"), Decimal("270.00")),
    (Decimal("6750"), Decimal("292.50")),
    (Decimal("7250"), Decimal("315.00")),
    (Decimal("7750"), Decimal("337.50")),
    (Decimal("8250"), Decimal("360.00")),
    (Decimal("8750"), Decimal("382.50")),
    (Decimal("9250"), Decimal("405.00")),
    (Decimal("9750"), Decimal("427.50")),
    (Decimal("10250"), Decimal("450.00")),
    (Decimal("10750"), Decimal("472.50")),
    (Decimal("11250"), Decimal("495.00")),
    (Decimal("11750"), Decimal("517.50")),
    (Decimal("12250"), Decimal("540.00")),
    (Decimal("12750"), Decimal("562.50")),
    (Decimal("13250"), Decimal("585.00")),
    (Decimal("13750"), Decimal("607.50")),
    (Decimal("14250"), Decimal("630.00")),
    (Decimal("14750"), Decimal("652.50")),
    (Decimal("15250"), Decimal("675.00")),
    (Decimal("15750"), Decimal("697.50")),
    (Decimal("16250"), Decimal("720.00")),
    (Decimal("16750"), Decimal("742.50")),
    (Decimal("17250"), Decimal("765.00")),
    (Decimal("17750"), Decimal("787.50")),
    (Decimal("18250"), Decimal("810.00")),
    (Decimal("18750"), Decimal("832.50")),
    (Decimal("19250"), Decimal("855.00")),
    (Decimal("19750"), Decimal("877.50")),
)
SSS_MAX_CONTRIBUTION = Decimal("900.00")

PAGIBIG_LOW_CEILING = Decimal("1500")
PAGIBIG_MID_CEILING = Decimal("5000")
PAGIBIG_LOW_RATE = Decimal("0.01")
PAGIBIG_MID_RATE = Decimal("0.02")
PAGIBIG_MAX_CONTRIBUTION = Decimal("100")

PHILHEALTH_FLOOR = Decimal("10000")
PHILHEALTH_CEILING = Decimal("100000")
PHILHEALTH_RATE = Decimal("0.05")
PHILHEALTH_EMPLOYEE_SHARE = Decimal("0.5")
PHILHEALTH_MIN_PREMIUM = Decimal("450")
PHILHEALTH_MAX_PREMIUM = Decimal("5000")

# (upper bound inclusive) -> (base tax, rate on excess, excess over)
WITHHOLDING_TAX_TABLE: Sequence[tuple[Decimal, Decimal, Decimal, Decimal]] = (
    (Decimal("20833"), ZERO, ZERO, ZERO),
    (Decimal("33332"), ZERO, Decimal("0.15"), Decimal("20833")),
    (Decimal("66666"), Decimal("1875"), Decimal("0.20"), Decimal("33332")),
    (Decimal("166666"), Decimal("8541.80"), Decimal("0.25"), Decimal("66666")),
    (Decimal("666666"), Decimal("33541.80"), Decimal("0.30"), Decimal("166666")),
)
# above the last bracket
WITHHOLDING_TAX_TOP_BRACKET = (Decimal("183541.80"), Decimal("0.35"), Decimal("666666"))


def sss_contribution(salary: Any) -> Decimal:
    salary = to_decimal(salary)
    for upper_bound, amount in SSS_TABLE:
        if salary < upper_bound:
            return amount
    return SSS_MAX_CONTRIBUTION


def pagibig_contribution(salary: Any) -> Decimal:
    """Pag-IBIG (HDMF) employee share.

    The jump from 99.98 at 4999 to a flat 100 at 5000 is bracket behavior and is
    kept as is.
    """
    salary = to_decimal(salary)
    if salary <= PAGIBIG_LOW_CEILING:
        return salary * PAGIBIG_LOW_RATE
    if salary < PAGIBIG_MID_CEILING:
        return salary * PAGIBIG_MID_RATE
    return PAGIBIG_MAX_CONTRIBUTION


def philhealth_contribution(salary: Any) -> Decimal:
    """Employee half of the PhilHealth premium. Not part of the active total."""
    salary = to_decimal(salary)
    if salary < PHILHEALTH_FLOOR:
        return PHILHEALTH_MIN_PREMIUM * PHILHEALTH_EMPLOYEE_SHARE
    if salary > PHILHEALTH_CEILING:
        return PHILHEALTH_MAX_PREMIUM * PHILHEALTH_EMPLOYEE_SHARE
    return salary * PHILHEALTH_RATE * PHILHEALTH_EMPLOYEE_SHARE


def withholding_tax(taxable_income: Any) -> Decimal:
    """Monthly withholding tax over six progressive brackets. Not part of the active total."""
    income = to_decimal(taxable_income)
    for upper_bound, base_tax, rate, excess_over in WITHHOLDING_TAX_TABLE:
        if income <= upper_bound:
            return base_tax + (income - excess_over) * rate
    base_tax, rate, excess_over = WITHHOLDING_TAX_TOP_BRACKET
    return base_tax + (income - excess_over) * rate


@dataclass(frozen=True)
class DeductionBreakdown:
    sss: Decimal = ZERO
    pagibig: Decimal = ZERO
    total: Decimal = ZERO

    def to_dict(self) -> dict:
        return {
            "sss": float(self.sss),
            "pagibig": float(self.pagibig),
            "total": float(self.total),
        }


def compute_deductions(gross_pay: Any) -> DeductionBreakdown:
    """Active deductions for one payslip: SSS + Pag-IBIG, each rounded to cents.

    ``total`` is rounded from the unrounded sum. A non-positive gross pay yields an
    all-zero breakdown.
    """
    gross_pay = to_decimal(gross_pay)
    if gross_pay <= 0:
        return DeductionBreakdown()

    sss = sss_contribution(gross_pay)
    pagibig = pagibig_contribution(gross_pay)
    return DeductionBreakdown(
        sss=round_money(sss),
        pagibig=round_money(pagibig),
        total=round_money(sss + pagibig),
    )
