from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.money import ZERO, to_decimal
from ..core.enums import AttendanceStatus

_SECONDS_PER_HOUR = Decimal("3600")


def worked_hours(check_in_time: Optional[datetime], check_out_time: Optional[datetime]) -> Decimal:
    """Hours between check-in and check-out, 0 if either is missing or the span is negative."""
    if not check_in_time or not check_out_time:
        return ZERO
    seconds = Decimal(int((check_out_time - check_in_time).total_seconds()))
    return max(seconds / _SECONDS_PER_HOUR, ZERO)


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: one attendance day for one employee."""

    attendance_id: int
    user_id: int
    work_date: date
    status: AttendanceStatus
    total_hours: Optional[Decimal] = None
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None

    @property
    def hours(self) -> Decimal:
        # recorded hours only; an entry without total_hours counts as 0
        return to_decimal(self.total_hours)


@dataclass(frozen=True)
class AttendanceAggregate:
    """Approved hours of one employee within one pay period."""

    total_hours_worked: Decimal = ZERO
    overtime_hours: Decimal = ZERO

    @property
    def regular_hours(self) -> Decimal:
        return self.total_hours_worked - self.overtime_hours
