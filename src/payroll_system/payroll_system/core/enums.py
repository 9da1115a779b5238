from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles. Only employees and managers are paid through payroll runs."""

    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Approval state of an attendance entry. Only APPROVED entries are paid."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PeriodStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
