from __future__ import annotations

import csv
import io
import logging
from collections.abc import Iterable
from datetime import date
from datetime import datetime
from datetime import timedelta
from decimal import Decimal

from .calculator import ZERO
from .calculator import InvalidShiftError
from .calculator import PayrollCalculator
from .calculator import parse_clock_time
from .calculator import round2
from .records import AttendanceRecord
from .records import Employee
from .records import Holiday
from .records import LeaveRequest
from .records import PayrollRecord
from .registry import get_payroll_calculator

logger = logging.getLogger(__name__)

CSV_HEADERS = (
    "Employee ID",
    "Name",
    "Position",
    "Department",
    "Regular Hours",
    "Overtime Hours",
    "Regular Pay (RS)",
    "Overtime Pay (RS)",
    "Meal Allowance (RS)",
    "Total Pay (RS)",
    "Transport Allowance (RS)",
    "Leave Deduction (RS)",
    "Days Present",
    "Days Late",
    "Days Absent",
)


def calculate_transport_allowance(
    employee: Employee, working_days: int, taxi_usage_days: int = 0
) -> Decimal:
    """Monthly transport allowance.

    Formula: (working_days - taxi_usage_days) * employee.transport_daily_rate

    Employees without a daily rate get nothing.
    """

    if not employee.transport_daily_rate:
        return round2(ZERO)
    eligible_days = Decimal(working_days - taxi_usage_days)
    return round2(eligible_days * Decimal(str(employee.transport_daily_rate)))


def _in_month(value: date, year: int, month: int) -> bool:
    return value.year == year and value.month == month


def calculate_monthly_payroll(  # noqa: PLR0913
    employee: Employee,
    attendance_records: Iterable[AttendanceRecord],
    year: int,
    month: int,
    holidays: Iterable[Holiday] = (),
    leave_requests: Iterable[LeaveRequest] = (),
    calculator: PayrollCalculator | None = None,
) -> PayrollRecord:
    """Aggregate one employee's month into a payroll record.

    - Late days count as present; absent days earn no shift pay.
    - A record whose clock-out is not after clock-in (an overnight shift,
      say) still counts as attended but earns no shift pay.
    - Approved unpaid leave starting in the month is deducted from the base
      salary.
    - ``total_pay = adjusted base + overtime + meal + transport``; regular
      shift pay is reported but already covered by the base salary.
    """

    calc = calculator or get_payroll_calculator()
    holidays = tuple(holidays)

    month_records = [
        record
        for record in attendance_records
        if record.employee_id == employee.employee_id
        and _in_month(record.date, year, month)
    ]

    regular_pay = overtime_pay = meal_allowance = ZERO
    regular_hours = overtime_hours = ZERO
    days_present = days_late = days_absent = 0

    for record in month_records:
        if record.status == AttendanceRecord.Status.PRESENT:
            days_present += 1
        elif record.status == AttendanceRecord.Status.LATE:
            days_present += 1
            days_late += 1
        elif record.status == AttendanceRecord.Status.ABSENT:
            days_absent += 1
            continue

        if record.time_in and record.time_out:
            try:
                pay = calc.calculate_shift_pay(
                    employee, record.date, record.time_in, record.time_out, holidays
                )
            except InvalidShiftError as exc:
                logger.warning(
                    "Skipping shift pay for %s on %s: %s",
                    employee.employee_id,
                    record.date,
                    exc,
                )
                continue
            regular_pay += pay.regular_pay
            overtime_pay += pay.overtime_pay
            meal_allowance += pay.meal_allowance
            regular_hours += pay.regular_hours
            overtime_hours += pay.overtime_hours

    leave_deduction = ZERO
    for leave in leave_requests:
        if (
            leave.employee_id == employee.employee_id
            and leave.status == LeaveRequest.Status.APPROVED
            and leave.is_unpaid
            and _in_month(leave.start_date, year, month)
        ):
            leave_deduction += calc.calculate_leave_deduction(
                leave.total_days,
                leave.total_hours,
                monthly_salary=employee.monthly_salary,
            )

    transport_allowance = calculate_transport_allowance(employee, len(month_records))

    base_salary = calc.monthly_salary_for(employee)
    adjusted_base_salary = base_salary - leave_deduction
    allowances = meal_allowance + transport_allowance
    total_pay = adjusted_base_salary + overtime_pay + allowances

    return PayrollRecord(
        employee_id=employee.employee_id,
        name=employee.name,
        position=employee.position,
        department=employee.department,
        regular_hours=round2(regular_hours),
        overtime_hours=round2(overtime_hours),
        regular_pay=round2(regular_pay),
        overtime_pay=round2(overtime_pay),
        meal_allowance=round2(meal_allowance),
        transport_allowance=transport_allowance,
        leave_deduction=round2(leave_deduction),
        adjusted_base_salary=round2(adjusted_base_salary),
        total_pay=round2(total_pay),
        days_present=days_present,
        days_late=days_late,
        days_absent=days_absent,
    )


def export_payroll_csv(records: Iterable[PayrollRecord]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for record in records:
        writer.writerow(
            [
                record.employee_id,
                record.name,
                record.position,
                record.department,
                str(record.regular_hours),
                str(record.overtime_hours),
                f"{record.regular_pay:.2f}",
                f"{record.overtime_pay:.2f}",
                str(record.meal_allowance),
                f"{record.total_pay:.2f}",
                f"{record.transport_allowance:.2f}",
                f"{record.leave_deduction:.2f}",
                record.days_present,
                record.days_late,
                record.days_absent,
            ]
        )
    return buffer.getvalue().rstrip("\n")


def calculate_working_hours(
    time_in: str, time_out: str, lunch_break_hours: Decimal | int = 0
) -> Decimal:
    """Hours worked between two clock times, less the lunch break.

    A clock-out earlier than the clock-in is read as the next day. Never
    negative.
    """

    anchor = date(2024, 1, 1)
    start = datetime.combine(anchor, parse_clock_time(time_in))
    end = datetime.combine(anchor, parse_clock_time(time_out))
    if end < start:
        end += timedelta(days=1)
    hours = Decimal(int((end - start).total_seconds())) / Decimal(3600)
    return round2(max(ZERO, hours - Decimal(str(lunch_break_hours))))


def calculate_late_minutes(expected_time: str, actual_time: str) -> int:
    anchor = date(2024, 1, 1)
    expected = datetime.combine(anchor, parse_clock_time(expected_time))
    actual = datetime.combine(anchor, parse_clock_time(actual_time))
    minutes = (actual - expected).total_seconds() / 60
    return max(0, round(minutes))
