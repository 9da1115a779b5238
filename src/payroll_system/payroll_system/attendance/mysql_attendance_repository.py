from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceEntry
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_approved_in_range(
        self,
        *,
        start_date: date,
        end_date: date,
        user_id: Optional[int] = None,
    ) -> Sequence[AttendanceEntry]:
        clauses = ["a.status=%s", "a.date BETWEEN %s AND %s"]
        params: list[object] = [AttendanceStatus.APPROVED.value, start_date, end_date]

        if user_id is not None:
            clauses.append("a.user_id=%s")
            params.append(int(user_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.attendance_id, a.user_id, a.date, a.status,
                       a.total_hours, a.check_in_time, a.check_out_time
                FROM attendance a
                WHERE {where}
                ORDER BY a.user_id ASC, a.date ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [
                AttendanceEntry(
                    attendance_id=int(r["attendance_id"]),
                    user_id=int(r["user_id"]),
                    work_date=r["date"],
                    status=AttendanceStatus(r["status"]),
                    total_hours=r.get("total_hours"),
                    check_in_time=r.get("check_in_time"),
                    check_out_time=r.get("check_out_time"),
                )
                for r in rows
            ]
