import logging
from datetime import date
from decimal import Decimal

import pytest

from workforce_payroll.payroll.records import AttendanceRecord
from workforce_payroll.payroll.records import Employee
from workforce_payroll.payroll.records import Holiday
from workforce_payroll.payroll.records import LeaveRequest
from workforce_payroll.payroll.registry import get_payroll_calculator
from workforce_payroll.payroll.services import CSV_HEADERS
from workforce_payroll.payroll.services import calculate_late_minutes
from workforce_payroll.payroll.services import calculate_monthly_payroll
from workforce_payroll.payroll.services import calculate_transport_allowance
from workforce_payroll.payroll.services import calculate_working_hours
from workforce_payroll.payroll.services import export_payroll_csv

Status = AttendanceRecord.Status


@pytest.fixture
def employee():
    return Employee(
        "EMP001",
        name="Jane Doe",
        department="Sales",
        position="Promoter",
        transport_daily_rate=Decimal(200),
        transport_category="Promoter",
    )


@pytest.fixture
def january(employee):
    return [
        # Monday, regular day.
        AttendanceRecord("EMP001", date(2024, 1, 8), Status.PRESENT, "08:00", "16:00"),
        # Tuesday, 3h of OT 1.5 and a meal.
        AttendanceRecord("EMP001", date(2024, 1, 9), Status.LATE, "08:00", "19:00", 20),
        AttendanceRecord("EMP001", date(2024, 1, 10), Status.ABSENT),
        # Sunday at OT 2.0.
        AttendanceRecord("EMP001", date(2024, 1, 14), Status.PRESENT, "08:00", "16:00"),
        # Other month and other employee are ignored.
        AttendanceRecord("EMP001", date(2024, 2, 1), Status.PRESENT, "08:00", "16:00"),
        AttendanceRecord("EMP002", date(2024, 1, 8), Status.PRESENT, "08:00", "16:00"),
    ]


def test_transport_allowance():
    employee = Employee("E1", transport_daily_rate=Decimal(180))

    assert calculate_transport_allowance(employee, 22) == Decimal("3960.00")
    assert calculate_transport_allowance(employee, 22, 2) == Decimal("3600.00")
    assert calculate_transport_allowance(Employee("E2"), 22) == Decimal("0.00")


def test_monthly_payroll_aggregates_shifts(calculator, employee, january):
    record = calculate_monthly_payroll(
        employee, january, 2024, 1, calculator=calculator
    )

    assert record.days_present == 3
    assert record.days_late == 1
    assert record.days_absent == 1
    assert record.regular_hours == Decimal("15.00")
    assert record.regular_pay == Decimal("1277.16")
    assert record.overtime_hours == Decimal("10.50")
    assert record.overtime_pay == Decimal("1656.00")
    assert record.meal_allowance == Decimal("150.00")
    # Four records in January at Rs200/day.
    assert record.transport_allowance == Decimal("800.00")
    assert record.leave_deduction == Decimal("0.00")
    assert record.adjusted_base_salary == Decimal("17710.00")
    # base + overtime + meal + transport
    assert record.total_pay == Decimal("20316.00")


def test_monthly_payroll_deducts_approved_unpaid_leave(calculator, employee):
    leaves = [
        LeaveRequest(
            "EMP001",
            date(2024, 1, 15),
            date(2024, 1, 16),
            "unpaid",
            LeaveRequest.Status.APPROVED,
            Decimal(2),
        ),
        LeaveRequest(
            "EMP001",
            date(2024, 1, 20),
            date(2024, 1, 20),
            "unpaid_sick",
            LeaveRequest.Status.APPROVED,
            Decimal(0),
            Decimal(4),
        ),
        # Pending, paid, other-month and other-employee requests are ignored.
        LeaveRequest(
            "EMP001", date(2024, 1, 22), date(2024, 1, 22), "unpaid", total_days=1
        ),
        LeaveRequest(
            "EMP001",
            date(2024, 1, 23),
            date(2024, 1, 23),
            "vacation",
            LeaveRequest.Status.APPROVED,
            Decimal(1),
        ),
        LeaveRequest(
            "EMP001",
            date(2024, 2, 1),
            date(2024, 2, 1),
            "unpaid",
            LeaveRequest.Status.APPROVED,
            Decimal(1),
        ),
        LeaveRequest(
            "EMP002",
            date(2024, 1, 15),
            date(2024, 1, 15),
            "unpaid",
            LeaveRequest.Status.APPROVED,
            Decimal(1),
        ),
    ]

    record = calculate_monthly_payroll(
        employee, [], 2024, 1, leave_requests=leaves, calculator=calculator
    )

    # 2 days (1362.31) plus 4 hours (340.58)
    assert record.leave_deduction == Decimal("1702.89")
    assert record.adjusted_base_salary == Decimal("16007.11")
    assert record.total_pay == Decimal("16007.11")


def test_monthly_payroll_honours_holidays(calculator, employee):
    records = [
        AttendanceRecord("EMP001", date(2024, 3, 12), Status.PRESENT, "08:00", "16:00")
    ]
    holidays = [Holiday(date(2024, 3, 12), "Independence Day")]

    record = calculate_monthly_payroll(
        employee, records, 2024, 3, holidays, calculator=calculator
    )

    assert record.overtime_pay == Decimal("1275.00")
    assert record.regular_pay == Decimal("0.00")


def test_monthly_payroll_skips_overnight_shift_pay(calculator, employee, caplog):
    records = [
        AttendanceRecord("EMP001", date(2024, 1, 2), Status.PRESENT, "08:00", "16:00"),
        AttendanceRecord("EMP001", date(2024, 1, 3), Status.PRESENT, "22:00", "06:00"),
    ]

    with caplog.at_level(logging.WARNING, logger="workforce_payroll"):
        record = calculate_monthly_payroll(
            employee, records, 2024, 1, calculator=calculator
        )

    assert record.days_present == 2
    assert record.regular_hours == Decimal("7.50")
    assert record.regular_pay == Decimal("638.58")
    assert record.overtime_pay == Decimal("0.00")
    assert record.transport_allowance == Decimal("400.00")
    assert "Skipping shift pay for EMP001 on 2024-01-03" in caplog.text


def test_monthly_payroll_defaults_to_registry(employee):
    record = calculate_monthly_payroll(employee, [], 2024, 1)

    expected = get_payroll_calculator().config.base_salary_structure
    assert record.adjusted_base_salary == expected.default_monthly_salary


def test_monthly_payroll_uses_employee_salary(calculator):
    employee = Employee("E9", monthly_salary=Decimal(26000))

    record = calculate_monthly_payroll(employee, [], 2024, 1, calculator=calculator)

    assert record.adjusted_base_salary == Decimal("26000.00")


def test_export_csv(calculator, employee, january):
    record = calculate_monthly_payroll(
        employee, january, 2024, 1, calculator=calculator
    )

    text = export_payroll_csv([record])

    header, row = text.split("\n")
    assert header.split(",") == list(CSV_HEADERS)
    assert row.split(",") == [
        "EMP001",
        "Jane Doe",
        "Promoter",
        "Sales",
        "15.00",
        "10.50",
        "1277.16",
        "1656.00",
        "150.00",
        "20316.00",
        "800.00",
        "0.00",
        "3",
        "1",
        "1",
    ]


def test_export_csv_without_records():
    assert export_payroll_csv([]) == ",".join(CSV_HEADERS)


@pytest.mark.parametrize(
    ("time_in", "time_out", "lunch", "expected"),
    [
        ("08:00", "16:30", 0.5, Decimal("8.00")),
        ("22:00", "06:00", 0, Decimal("8.00")),
        ("09:00", "09:15", 1, Decimal("0.00")),
    ],
)
def test_working_hours(time_in, time_out, lunch, expected):
    assert calculate_working_hours(time_in, time_out, lunch) == expected


@pytest.mark.parametrize(
    ("expected", "actual", "minutes"),
    [("09:00", "09:20", 20), ("09:00", "08:50", 0), ("09:00", "09:00", 0)],
)
def test_late_minutes(expected, actual, minutes):
    assert calculate_late_minutes(expected, actual) == minutes
