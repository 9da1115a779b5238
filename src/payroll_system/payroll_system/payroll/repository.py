from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import PayrollPeriod


class PayrollPeriodRepository(Protocol):
    def list_all(self) -> Sequence[PayrollPeriod]:
        """All periods, newest start date first."""

        raise NotImplementedError

    def get_by_id(self, period_id: int) -> Optional[PayrollPeriod]:
        raise NotImplementedError

    def create(self, *, period_name: str, start_date: date, end_date: date, pay_date: Optional[date]) -> PayrollPeriod:
        raise NotImplementedError
