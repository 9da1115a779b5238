from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: the payroll-relevant slice of a user account.

    Note: Plain data object (no DB access code).
    """

    user_id: int
    employee_id: Optional[str]
    first_name: str
    last_name: str
    position: Optional[str]
    role: Role
    hourly_rate: Optional[Decimal] = None
    salary: Optional[Decimal] = None
    is_active: bool = True
