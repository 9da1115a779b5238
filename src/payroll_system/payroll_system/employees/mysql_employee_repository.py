from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "user_id, employee_id, first_name, last_name, position, role, hourly_rate, salary, status"


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        user_id=int(r["user_id"]),
        employee_id=r.get("employee_id"),
        first_name=r.get("first_name") or "",
        last_name=r.get("last_name") or "",
        position=r.get("position"),
        role=Role(r["role"]),
        hourly_rate=r.get("hourly_rate"),
        salary=r.get("salary"),
        is_active=(r.get("status") or "active") == "active",
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (int(user_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_payroll_employees(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM users
                WHERE role IN (%s, %s) AND status='active'
                ORDER BY last_name, first_name
                """,
                (Role.EMPLOYEE.value, Role.MANAGER.value),
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def update_pay_rate(self, *, user_id: int, hourly_rate: Decimal, salary: Decimal) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE users
                SET hourly_rate=%s, salary=%s, updated_at=CURRENT_TIMESTAMP
                WHERE user_id=%s
                """,
                (hourly_rate, salary, int(user_id)),
            )
            return cur.rowcount > 0
