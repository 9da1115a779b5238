from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from src.payroll_system.payroll_system.attendance.aggregator import aggregate_attendance
from src.payroll_system.payroll_system.attendance.model import AttendanceEntry, worked_hours
from src.payroll_system.payroll_system.core.enums import AttendanceStatus

_next_id = iter(range(1, 1000))


def entry(day: int, hours, status=AttendanceStatus.APPROVED, **kwargs) -> AttendanceEntry:
    return AttendanceEntry(
        attendance_id=next(_next_id),
        user_id=1,
        work_date=date(2026, 1, day),
        status=status,
        total_hours=Decimal(str(hours)) if hours is not None else None,
        **kwargs,
    )


def test_overtime_is_counted_per_day_not_per_period():
    agg = aggregate_attendance([entry(5, 10), entry(6, 6)], start=date(2026, 1, 1), end=date(2026, 1, 15))

    assert agg.total_hours_worked == Decimal("16")
    # period-level max(16 - 8, 0) would give 8
    assert agg.overtime_hours == Decimal("2")
    assert agg.regular_hours == Decimal("14")


def test_only_approved_entries_inside_the_period_count():
    entries = [
        entry(1, 9),
        entry(15, 8),
        entry(7, 12, status=AttendanceStatus.PENDING),
        entry(8, 12, status=AttendanceStatus.REJECTED),
        entry(16, 12),
    ]

    agg = aggregate_attendance(entries, start=date(2026, 1, 1), end=date(2026, 1, 15))

    assert agg.total_hours_worked == Decimal("17")
    assert agg.overtime_hours == Decimal("1")


def test_entries_on_same_day_share_the_eight_hour_threshold():
    agg = aggregate_attendance([entry(3, 5), entry(3, 5)], start=date(2026, 1, 1), end=date(2026, 1, 31))

    assert agg.total_hours_worked == Decimal("10")
    assert agg.overtime_hours == Decimal("2")


def test_entry_without_recorded_hours_counts_as_zero():
    e = entry(
        4,
        None,
        check_in_time=datetime(2026, 1, 4, 8, 0),
        check_out_time=datetime(2026, 1, 4, 18, 0),
    )

    agg = aggregate_attendance([e, entry(5, 9)], start=date(2026, 1, 1), end=date(2026, 1, 31))

    assert agg.total_hours_worked == Decimal("9")
    assert agg.overtime_hours == Decimal("1")


def test_worked_hours_is_zero_without_checkout_or_for_negative_span():
    assert worked_hours(datetime(2026, 1, 4, 8, 0), None) == 0
    assert worked_hours(datetime(2026, 1, 4, 17, 0), datetime(2026, 1, 4, 8, 0)) == 0


def test_no_entries_gives_empty_aggregate():
    agg = aggregate_attendance([], start=date(2026, 1, 1), end=date(2026, 1, 31))

    assert agg.total_hours_worked == 0
    assert agg.overtime_hours == 0
