"""Configuration-driven pay calculations.

A :class:`PayrollCalculator` is bound to exactly one
:class:`~workforce_payroll.companies.configuration.CompanyConfiguration` and
holds no other state, so every method is a pure function of the bound
configuration and its arguments. All money is :class:`~decimal.Decimal` and
every amount that leaves the calculator is rounded half-up to the cent.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from datetime import datetime
from datetime import time
from decimal import ROUND_HALF_UP
from decimal import Decimal

from workforce_payroll.companies.configuration import CompanyConfiguration
from workforce_payroll.companies.configuration import OvertimeTier

from .records import Employee
from .records import Holiday

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
CENT = Decimal("0.01")
_SECONDS_PER_HOUR = Decimal(3600)
_MINUTES_PER_HOUR = Decimal(60)
_WORKING_DAYS_PER_WEEK = 5


class InvalidShiftError(ValueError):
    """Clock-in/clock-out times that cannot describe a shift."""


def round2(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def _number(value: Decimal) -> str:
    # 170 -> "170", 127.50 -> "127.5"
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")


def _one_place(hours: Decimal) -> str:
    return str(hours.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def parse_clock_time(value: str | time) -> time:
    if isinstance(value, time):
        return value
    try:
        return datetime.strptime(value, "%H:%M").time()  # noqa: DTZ007
    except (TypeError, ValueError):
        msg = f"Invalid time {value!r}; expected HH:MM"
        raise InvalidShiftError(msg) from None


def shift_hours(time_in: str | time, time_out: str | time) -> Decimal:
    """Hours between two same-day clock times."""

    start = parse_clock_time(time_in)
    end = parse_clock_time(time_out)
    anchor = date(2024, 1, 1)
    delta = datetime.combine(anchor, end) - datetime.combine(anchor, start)
    return Decimal(int(delta.total_seconds())) / _SECONDS_PER_HOUR


def is_public_holiday(work_date: date, holidays: Iterable[Holiday]) -> bool:
    return any(holiday.date == work_date for holiday in holidays)


def is_sunday(work_date: date) -> bool:
    return work_date.weekday() == 6  # noqa: PLR2004


@dataclass(frozen=True)
class ShiftPay:
    regular_pay: Decimal
    overtime_pay: Decimal
    meal_allowance: Decimal
    total_pay: Decimal
    overtime_hours: Decimal
    regular_hours: Decimal
    # Which tier(s) applied and at what rate; for payslips, not for parsing.
    ot_rate: str

    def as_dict(self) -> dict:
        return {
            "regularPay": self.regular_pay,
            "overtimePay": self.overtime_pay,
            "mealAllowance": self.meal_allowance,
            "totalPay": self.total_pay,
            "overtimeHours": self.overtime_hours,
            "regularHours": self.regular_hours,
            "otRate": self.ot_rate,
        }


@dataclass(frozen=True)
class EmployeeContributions:
    npf: Decimal = ZERO
    nsf: Decimal = ZERO
    csg: Decimal = ZERO
    total: Decimal = ZERO

    def as_dict(self) -> dict:
        return {"npf": self.npf, "nsf": self.nsf, "csg": self.csg, "total": self.total}


@dataclass(frozen=True)
class EmployerContributions:
    npf: Decimal = ZERO
    nsf: Decimal = ZERO
    csg: Decimal = ZERO
    training_levy: Decimal = ZERO
    total: Decimal = ZERO

    def as_dict(self) -> dict:
        return {
            "npf": self.npf,
            "nsf": self.nsf,
            "csg": self.csg,
            "trainingLevy": self.training_levy,
            "total": self.total,
        }


@dataclass(frozen=True)
class ContributionSplit:
    employee_contributions: EmployeeContributions
    employer_contributions: EmployerContributions
    net_salary: Decimal

    def as_dict(self) -> dict:
        return {
            "employeeContributions": self.employee_contributions.as_dict(),
            "employerContributions": self.employer_contributions.as_dict(),
            "netSalary": self.net_salary,
        }


@dataclass
class _Split:
    """Unrounded intermediate figures for one shift."""

    regular_hours: Decimal = ZERO
    regular_pay: Decimal = ZERO
    overtime_hours: Decimal = ZERO
    overtime_pay: Decimal = ZERO
    ot_rate: str = ""


class PayrollCalculator:
    def __init__(self, config: CompanyConfiguration):
        self.config = config

    def __repr__(self) -> str:
        return f"<PayrollCalculator company={self.config.company_name!r}>"

    is_public_holiday = staticmethod(is_public_holiday)
    is_sunday = staticmethod(is_sunday)

    # -- rates ---------------------------------------------------------------

    def monthly_salary_for(self, employee: Employee | None) -> Decimal:
        salary = getattr(employee, "monthly_salary", None)
        if salary:
            return Decimal(str(salary))
        return self.config.base_salary_structure.default_monthly_salary

    def daily_rate(self, employee: Employee | None = None) -> Decimal:
        salary = self.config.base_salary_structure
        return self.monthly_salary_for(employee) / salary.working_days_per_month

    def hourly_rate(self, employee: Employee | None = None) -> Decimal:
        salary = self.config.base_salary_structure
        return self.daily_rate(employee) / salary.standard_working_hours

    # -- shift pay -----------------------------------------------------------

    def _breaks(self, *, holiday: bool = False, extended: bool = False) -> Decimal:
        """Unpaid break time, in hours.

        Every shift loses at least the lunch break; extended holiday/Sunday
        shifts also lose the dinner break.
        """

        rules = self.config.break_deduction_rules
        minutes = rules.lunch.duration
        if holiday and extended:
            minutes += rules.dinner.duration
        return minutes / _MINUTES_PER_HOUR

    def _lunch_hours(self) -> Decimal:
        return self.config.working_schedule.lunch_break_minutes / _MINUTES_PER_HOUR

    def _flat_tier(self, tier: OvertimeTier, total_hours: Decimal) -> _Split:
        payable = max(ZERO, total_hours - self._breaks(holiday=True))
        rate = self.config.overtime_rules.rate(tier)
        symbol = self.config.base_salary_structure.currency_symbol
        return _Split(
            overtime_hours=payable,
            overtime_pay=payable * rate,
            ot_rate=f"{tier.label} ({symbol}{_number(rate)}/hr)",
        )

    def _unadjusted_regular(self, total_hours: Decimal, hourly_rate: Decimal) -> _Split:
        return _Split(
            regular_hours=total_hours,
            regular_pay=total_hours * hourly_rate,
            ot_rate="Regular Rate",
        )

    def _holiday_split(
        self,
        total_hours: Decimal,
        hourly_rate: Decimal,
        *,
        sunday_only: bool,
        part_time_weekday_off: bool,
    ) -> _Split:
        rules = self.config.overtime_rules
        standard_hours = self.config.base_salary_structure.standard_working_hours

        if part_time_weekday_off and sunday_only:
            if rules.is_enabled(OvertimeTier.OT_1_0):
                return self._flat_tier(OvertimeTier.OT_1_0, total_hours)
            return self._unadjusted_regular(total_hours, hourly_rate)

        if total_hours <= standard_hours:
            if rules.is_enabled(OvertimeTier.OT_2_0):
                return self._flat_tier(OvertimeTier.OT_2_0, total_hours)
            return self._unadjusted_regular(total_hours, hourly_rate)

        ot2_enabled = rules.is_enabled(OvertimeTier.OT_2_0)
        if ot2_enabled and rules.is_enabled(OvertimeTier.OT_3_0):
            lunch = self._lunch_hours()
            first = max(ZERO, standard_hours - lunch)
            extra_break = self._breaks(holiday=True, extended=True) - lunch
            second = max(ZERO, (total_hours - standard_hours) - extra_break)
            rate2 = rules.rate(OvertimeTier.OT_2_0)
            rate3 = rules.rate(OvertimeTier.OT_3_0)
            symbol = self.config.base_salary_structure.currency_symbol
            return _Split(
                overtime_hours=first + second,
                overtime_pay=first * rate2 + second * rate3,
                ot_rate=(
                    f"OT 2.0+3.0 ({_one_place(first)}h @ {symbol}{_number(rate2)}"
                    f" + {_one_place(second)}h @ {symbol}{_number(rate3)})"
                ),
            )
        if ot2_enabled:
            return self._flat_tier(OvertimeTier.OT_2_0, total_hours)
        return self._unadjusted_regular(total_hours, hourly_rate)

    def _weekday_split(self, total_hours: Decimal, hourly_rate: Decimal) -> _Split:
        rules = self.config.overtime_rules
        standard_hours = self.config.base_salary_structure.standard_working_hours

        if total_hours <= standard_hours:
            hours = max(ZERO, total_hours - self._breaks())
            return _Split(
                regular_hours=hours,
                regular_pay=hours * hourly_rate,
                ot_rate="Regular Day",
            )

        if not rules.is_enabled(OvertimeTier.OT_1_5):
            hours = max(ZERO, total_hours - self._breaks())
            return _Split(
                regular_hours=hours,
                regular_pay=hours * hourly_rate,
                ot_rate="Regular Rate (OT 1.5 disabled)",
            )

        lunch = self._lunch_hours()
        regular = max(ZERO, standard_hours - lunch)
        extra_break = self._breaks(extended=True) - lunch
        overtime = max(ZERO, (total_hours - standard_hours) - extra_break)
        rate = rules.rate(OvertimeTier.OT_1_5)
        symbol = self.config.base_salary_structure.currency_symbol
        label = f"Regular + OT 1.5 ({_one_place(overtime)}h @ {symbol}{_number(rate)})"
        return _Split(
            regular_hours=regular,
            regular_pay=regular * hourly_rate,
            overtime_hours=overtime,
            overtime_pay=overtime * rate,
            ot_rate=label,
        )

    def _apply_overtime_cap(self, split: _Split) -> None:
        if not self.config.enforces_overtime_limits:
            return
        limits = self.config.mauritius_settings.overtime_limits
        weekly_limit = limits.max_overtime_per_week
        # Daily proxy for the weekly legal limit.
        daily_cap = weekly_limit / _WORKING_DAYS_PER_WEEK
        if split.overtime_hours <= daily_cap:
            return
        logger.info(
            "Capping %s overtime hours at %s (weekly limit %s)",
            split.overtime_hours,
            daily_cap,
            weekly_limit,
        )
        split.overtime_pay = split.overtime_pay / split.overtime_hours * daily_cap
        split.overtime_hours = daily_cap
        split.ot_rate += f" (Capped: Mauritius limit {_number(weekly_limit)}h/week)"

    def calculate_shift_pay(  # noqa: PLR0913
        self,
        employee: Employee | None,
        work_date: date,
        time_in: str | time,
        time_out: str | time,
        holidays: Iterable[Holiday] = (),
        *,
        part_time_weekday_off: bool = False,
    ) -> ShiftPay:
        """Pay for one shift worked on ``work_date``.

        Raises :class:`InvalidShiftError` when clock-out is not after
        clock-in. ``part_time_weekday_off`` marks a Sunday that is the
        employee's designated day off; such a shift is paid at the OT 1.0
        rate.
        """

        total_hours = shift_hours(time_in, time_out)
        if total_hours <= 0:
            msg = f"Clock-out {time_out} is not after clock-in {time_in}"
            raise InvalidShiftError(msg)

        holidays = tuple(holidays)
        holiday = is_public_holiday(work_date, holidays)
        sunday = is_sunday(work_date)
        hourly_rate = self.hourly_rate(employee)

        meal = self.config.meal_allowance
        meal_allowance = ZERO
        if meal.enabled and total_hours >= meal.minimum_hours:
            meal_allowance = meal.amount

        if holiday or sunday:
            split = self._holiday_split(
                total_hours,
                hourly_rate,
                sunday_only=sunday and not holiday,
                part_time_weekday_off=part_time_weekday_off,
            )
        else:
            split = self._weekday_split(total_hours, hourly_rate)

        self._apply_overtime_cap(split)

        regular_pay = round2(split.regular_pay)
        overtime_pay = round2(split.overtime_pay)
        meal_allowance = round2(meal_allowance)
        return ShiftPay(
            regular_pay=regular_pay,
            overtime_pay=overtime_pay,
            meal_allowance=meal_allowance,
            total_pay=regular_pay + overtime_pay + meal_allowance,
            overtime_hours=round2(split.overtime_hours),
            regular_hours=round2(split.regular_hours),
            ot_rate=split.ot_rate,
        )

    # -- leave and contributions ---------------------------------------------

    def calculate_leave_deduction(
        self,
        total_days: Decimal | int | None = None,
        total_hours: Decimal | int | None = None,
        *,
        monthly_salary: Decimal | None = None,
    ) -> Decimal:
        """Salary deducted for unpaid leave.

        Hours take priority over days when both are given. The
        ``includeOvertime`` setting is not applied.
        """

        settings = self.config.leave_management.unpaid_leave_calculation
        structure = self.config.base_salary_structure
        base = structure.default_monthly_salary
        if monthly_salary:
            base = Decimal(str(monthly_salary))

        meal = self.config.meal_allowance
        if settings.include_allowances and meal.enabled:
            # Approximates a month of meal allowance.
            base += meal.amount * settings.divisor_days

        daily_rate = base / settings.divisor_days
        hours = Decimal(str(total_hours or 0))
        days = Decimal(str(total_days or 0))
        if hours > 0:
            return round2(daily_rate / structure.standard_working_hours * hours)
        if days > 0:
            return round2(daily_rate * days)
        return round2(ZERO)

    def calculate_mauritius_contributions(
        self, gross_salary: Decimal | int
    ) -> ContributionSplit:
        gross = Decimal(str(gross_salary))
        settings = self.config.mauritius_settings
        if not self.config.features.mauritius_compliance or settings is None:
            return ContributionSplit(
                employee_contributions=EmployeeContributions(),
                employer_contributions=EmployerContributions(),
                net_salary=gross,
            )

        rates = settings.statutory_contributions

        def amount(contribution) -> Decimal:
            if not contribution.enabled:
                return ZERO
            return gross * contribution.rate / 100

        employee = [
            amount(rates.employee_npf),
            amount(rates.employee_nsf),
            amount(rates.employee_csg),
        ]
        employer = [
            amount(rates.employer_npf),
            amount(rates.employer_nsf),
            amount(rates.employer_csg),
            amount(rates.training_levy),
        ]
        # Totals and net salary use the unrounded amounts.
        employee_total = sum(employee, ZERO)
        employer_total = sum(employer, ZERO)
        return ContributionSplit(
            employee_contributions=EmployeeContributions(
                *(round2(value) for value in employee), total=round2(employee_total)
            ),
            employer_contributions=EmployerContributions(
                *(round2(value) for value in employer), total=round2(employer_total)
            ),
            net_salary=round2(gross - employee_total),
        )
