from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, user_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_payroll_employees(self) -> Sequence[Employee]:
        """Active employees and managers, ordered by last name then first name."""

        raise NotImplementedError

    def update_pay_rate(self, *, user_id: int, hourly_rate: Decimal, salary: Decimal) -> bool:
        raise NotImplementedError
