"""Plain records the payroll calculations consume and produce.

These are supplied by the attendance and leave layers; the calculator only
reads them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Employee:
    employee_id: str
    name: str = ""
    department: str = ""
    position: str = ""
    # Overrides the company's default monthly salary when set.
    monthly_salary: Decimal | None = None
    transport_daily_rate: Decimal | None = None
    transport_category: str = ""


@dataclass(frozen=True)
class Holiday:
    date: date
    name: str = ""


@dataclass(frozen=True)
class AttendanceRecord:
    class Status:
        PRESENT = "present"
        LATE = "late"
        ABSENT = "absent"
        LEAVE = "leave"

    employee_id: str
    date: date
    status: str = Status.PRESENT
    time_in: str | None = None
    time_out: str | None = None
    minutes_late: int = 0


@dataclass(frozen=True)
class LeaveRequest:
    class Status:
        PENDING = "pending"
        APPROVED = "approved"
        REJECTED = "rejected"

    # Leave types deducted from salary.
    UNPAID_TYPES = ("unpaid", "unpaid_sick")

    employee_id: str
    start_date: date
    end_date: date
    type: str
    status: str = Status.PENDING
    total_days: Decimal = Decimal(0)
    total_hours: Decimal | None = None

    @property
    def is_unpaid(self) -> bool:
        return self.type in self.UNPAID_TYPES


@dataclass(frozen=True)
class PayrollRecord:
    employee_id: str
    name: str
    position: str
    department: str
    regular_hours: Decimal
    overtime_hours: Decimal
    regular_pay: Decimal
    overtime_pay: Decimal
    meal_allowance: Decimal
    transport_allowance: Decimal
    leave_deduction: Decimal
    adjusted_base_salary: Decimal
    total_pay: Decimal
    days_present: int
    days_late: int
    days_absent: int
