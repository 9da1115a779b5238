from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import PeriodStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import PayrollPeriod
from .repository import PayrollPeriodRepository

_COLUMNS = "period_id, period_name, start_date, end_date, pay_date, status"


def _to_period(r: Dict[str, Any]) -> PayrollPeriod:
    return PayrollPeriod(
        period_id=int(r["period_id"]),
        period_name=r["period_name"],
        start_date=r["start_date"],
        end_date=r["end_date"],
        pay_date=r.get("pay_date"),
        status=PeriodStatus(r.get("status") or PeriodStatus.OPEN.value),
    )


class MySQLPayrollPeriodRepository(PayrollPeriodRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[PayrollPeriod]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payroll_periods ORDER BY start_date DESC")
            return [_to_period(r) for r in fetchall(cur)]

    def get_by_id(self, period_id: int) -> Optional[PayrollPeriod]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payroll_periods WHERE period_id=%s", (int(period_id),))
            r = fetchone(cur)
            return _to_period(r) if r else None

    def create(self, *, period_name: str, start_date: date, end_date: date, pay_date: Optional[date]) -> PayrollPeriod:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payroll_periods(period_name, start_date, end_date, pay_date, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (period_name, start_date, end_date, pay_date, PeriodStatus.OPEN.value),
            )
            return PayrollPeriod(
                period_id=int(cur.lastrowid),
                period_name=period_name,
                start_date=start_date,
                end_date=end_date,
                pay_date=pay_date,
                status=PeriodStatus.OPEN,
            )
