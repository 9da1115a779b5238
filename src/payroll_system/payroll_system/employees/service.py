from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..common.validators import require_decimal, require_non_negative
from ..core.exceptions import NotFoundError
from ..core.logging_config import get_logger
from ..payroll.model import PayProfile
from .repository import EmployeeRepository

logger = get_logger("employees.service")


class EmployeePayService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def set_hourly_rate(self, *, user_id: int, hourly_rate: Any) -> Decimal:
        """Store a new hourly rate and the matching 160-hour monthly salary.

        Returns the monthly salary written alongside the rate.
        """
        rate = require_non_negative(require_decimal(hourly_rate, "hourly_rate"), "hourly_rate")

        if not self._employees.get_by_id(int(user_id)):
            raise NotFoundError("Employee not found")

        salary = PayProfile.monthly_salary_for(rate)
        if not self._employees.update_pay_rate(user_id=int(user_id), hourly_rate=rate, salary=salary):
            raise NotFoundError("Employee not found")

        logger.info("Updated pay rate for user_id=%s: hourly_rate=%s salary=%s", user_id, rate, salary)
        return salary
