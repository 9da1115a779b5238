from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeePayService
from .payroll.mysql_period_repository import MySQLPayrollPeriodRepository
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    periods_repo: MySQLPayrollPeriodRepository

    payroll_service: PayrollService
    employee_pay_service: EmployeePayService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    periods_repo = MySQLPayrollPeriodRepository(conn)

    payroll_service = PayrollService(periods_repo, employees_repo, attendance_repo)
    employee_pay_service = EmployeePayService(employees_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        periods_repo=periods_repo,
        payroll_service=payroll_service,
        employee_pay_service=employee_pay_service,
    )
