"""Pre-configuration-engine entry points.

Each function delegates to the registry's current calculator. New code
should take a :class:`~workforce_payroll.payroll.calculator.PayrollCalculator`
explicitly instead.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from datetime import time
from decimal import Decimal

from workforce_payroll.companies.configuration import OvertimeTier

from . import calculator as _calculator
from .calculator import ShiftPay
from .records import Employee
from .records import Holiday
from .registry import get_payroll_calculator

def payroll_constants() -> dict[str, Decimal]:
    """Rates of the currently bound configuration, keyed like the fixed ones."""

    calc = get_payroll_calculator()
    config = calc.config
    rules = config.overtime_rules
    return {
        "MONTHLY_BASE_SALARY": config.base_salary_structure.default_monthly_salary,
        "DAILY_RATE": calc.daily_rate(),
        "HOURLY_RATE": calc.hourly_rate(),
        "OT_RATE_1_0": rules.rate(OvertimeTier.OT_1_0),
        "OT_RATE_1_5": rules.rate(OvertimeTier.OT_1_5),
        "OT_RATE_2_0": rules.rate(OvertimeTier.OT_2_0),
        "OT_RATE_3_0": rules.rate(OvertimeTier.OT_3_0),
        "MEAL_ALLOWANCE": config.meal_allowance.amount,
        "MEAL_ALLOWANCE_THRESHOLD": config.meal_allowance.minimum_hours,
    }


def is_public_holiday(work_date: date, holidays: Iterable[Holiday]) -> bool:
    return _calculator.is_public_holiday(work_date, holidays)


def is_sunday(work_date: date) -> bool:
    return _calculator.is_sunday(work_date)


def calculate_daily_pay(
    employee: Employee | None,
    work_date: date,
    time_in: str | time,
    time_out: str | time,
    holidays: Iterable[Holiday] = (),
) -> ShiftPay:
    return get_payroll_calculator().calculate_shift_pay(
        employee, work_date, time_in, time_out, holidays
    )


def calculate_leave_deduction(
    base_salary: Decimal | int | None,  # noqa: ARG001
    total_days: Decimal | int | None = None,
    total_hours: Decimal | int | None = None,
) -> Decimal:
    """``base_salary`` is accepted for old callers and ignored."""

    return get_payroll_calculator().calculate_leave_deduction(total_days, total_hours)
