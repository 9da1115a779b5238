from __future__ import annotations

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable

from ..common.money import ZERO
from ..core.constants import STANDARD_DAILY_HOURS
from ..core.enums import AttendanceStatus
from .model import AttendanceAggregate, AttendanceEntry


def daily_overtime(hours: Decimal) -> Decimal:
    return max(hours - STANDARD_DAILY_HOURS, ZERO)


def aggregate_attendance(entries: Iterable[AttendanceEntry], *, start: date, end: date) -> AttendanceAggregate:
    """Sum one employee's approved hours dated within [start, end].

    Overtime is the excess over 8 hours taken day by day and then summed, so a
    short day never offsets a long one. Entries sharing a date count as one day.
    """
    hours_by_day: dict[date, Decimal] = defaultdict(lambda: ZERO)
    for entry in entries:
        if entry.status != AttendanceStatus.APPROVED:
            continue
        if not (start <= entry.work_date <= end):
            continue
        hours_by_day[entry.work_date] += entry.hours

    total = sum(hours_by_day.values(), ZERO)
    overtime = sum((daily_overtime(h) for h in hours_by_day.values()), ZERO)
    return AttendanceAggregate(total_hours_worked=total, overtime_hours=overtime)
