from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..model import Payslip


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute_payslip(self, hourly_rate: Any, total_hours_worked: Any, overtime_hours: Any) -> Payslip:
        raise NotImplementedError
