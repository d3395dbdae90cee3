import logging
from datetime import date
from datetime import time
from decimal import Decimal

import pytest

from workforce_payroll.companies.configuration import CompanyConfiguration
from workforce_payroll.companies.defaults import get_baseline_document
from workforce_payroll.companies.defaults import get_fallback_document
from workforce_payroll.payroll.calculator import InvalidShiftError
from workforce_payroll.payroll.calculator import PayrollCalculator
from workforce_payroll.payroll.calculator import round2
from workforce_payroll.payroll.calculator import shift_hours
from workforce_payroll.payroll.records import Employee
from workforce_payroll.payroll.records import Holiday

MONDAY = date(2024, 1, 1)
SUNDAY = date(2024, 1, 7)


def _calculator_without_tiers() -> PayrollCalculator:
    doc = get_fallback_document()
    for rule in doc["overtimeRules"].values():
        rule["enabled"] = False
    return PayrollCalculator(CompanyConfiguration.from_document(doc))


def _calculator_with_hour_lunch() -> PayrollCalculator:
    doc = get_fallback_document()
    doc["attendanceSettings"]["breakDeductionRules"]["lunch"]["duration"] = 60
    return PayrollCalculator(CompanyConfiguration.from_document(doc))


def _compliant_calculator(**statutory) -> PayrollCalculator:
    doc = get_baseline_document()
    doc["features"]["mauritiusCompliance"] = True
    doc["mauritiusSettings"] = {"statutoryContributions": statutory}
    return PayrollCalculator(CompanyConfiguration.from_document(doc))


def test_round2_is_half_up():
    assert round2(Decimal("2.675")) == Decimal("2.68")
    assert round2(Decimal("2.665")) == Decimal("2.67")
    assert round2(Decimal("-0.005")) == Decimal("-0.01")


def test_shift_hours_accepts_strings_and_times():
    assert shift_hours("08:00", "16:30") == Decimal("8.5")
    assert shift_hours(time(8), time(9, 15)) == Decimal("1.25")


def test_rates(calculator):
    assert calculator.daily_rate() == Decimal(17710) / 26
    assert calculator.hourly_rate() == Decimal(17710) / 26 / 8
    assert calculator.hourly_rate(Employee("E1", monthly_salary=Decimal(26000))) == 125


def test_regular_weekday_shift(calculator):
    pay = calculator.calculate_shift_pay(None, MONDAY, "08:00", "16:00")

    assert pay.regular_hours == Decimal("7.50")
    assert pay.regular_pay == Decimal("638.58")
    assert pay.overtime_hours == Decimal("0.00")
    assert pay.overtime_pay == Decimal("0.00")
    assert pay.meal_allowance == Decimal("0.00")
    assert pay.total_pay == Decimal("638.58")
    assert pay.ot_rate == "Regular Day"


def test_sunday_shift_is_paid_at_ot_2_0(calculator):
    pay = calculator.calculate_shift_pay(None, SUNDAY, "08:00", "16:00")

    assert pay.regular_pay == Decimal("0.00")
    assert pay.overtime_hours == Decimal("7.50")
    assert pay.overtime_pay == Decimal("1275.00")
    assert pay.total_pay == Decimal("1275.00")
    assert pay.ot_rate == "OT 2.0 (Rs170/hr)"


def test_public_holiday_counts_like_sunday(calculator):
    holidays = [Holiday(MONDAY, "New Year")]

    pay = calculator.calculate_shift_pay(None, MONDAY, "08:00", "16:00", holidays)

    assert pay.overtime_pay == Decimal("1275.00")


def test_weekday_overtime_after_standard_hours(calculator):
    pay = calculator.calculate_shift_pay(None, MONDAY, "08:00", "19:00")

    assert pay.regular_hours == Decimal("7.50")
    assert pay.regular_pay == Decimal("638.58")
    assert pay.overtime_hours == Decimal("3.00")
    assert pay.overtime_pay == Decimal("381.00")
    assert pay.meal_allowance == Decimal("150.00")
    assert pay.total_pay == Decimal("1169.58")
    assert pay.ot_rate == "Regular + OT 1.5 (3.0h @ Rs127)"


def test_extended_holiday_splits_ot_2_0_and_3_0(calculator):
    holidays = [Holiday(MONDAY)]

    pay = calculator.calculate_shift_pay(None, MONDAY, "08:00", "20:00", holidays)

    # 7.5h at 170 after lunch, then 3.5h at 255 after dinner.
    assert pay.overtime_hours == Decimal("11.00")
    assert pay.overtime_pay == Decimal("2167.50")
    assert pay.meal_allowance == Decimal("150.00")
    assert pay.total_pay == Decimal("2317.50")
    assert pay.ot_rate == "OT 2.0+3.0 (7.5h @ Rs170 + 3.5h @ Rs255)"


def test_longer_lunch_rule_shortens_a_regular_day():
    pay = _calculator_with_hour_lunch().calculate_shift_pay(
        None, MONDAY, "08:00", "16:00"
    )

    assert pay.regular_hours == Decimal("7.00")
    assert pay.regular_pay == Decimal("596.01")


def test_longer_lunch_rule_comes_out_of_weekday_overtime():
    pay = _calculator_with_hour_lunch().calculate_shift_pay(
        None, MONDAY, "08:00", "19:00"
    )

    # Standard day keeps the scheduled 30 min lunch; the other 30 min of the
    # hour-long lunch rule is taken from the 3h of overtime.
    assert pay.regular_hours == Decimal("7.50")
    assert pay.regular_pay == Decimal("638.58")
    assert pay.overtime_hours == Decimal("2.50")
    assert pay.overtime_pay == Decimal("317.50")
    assert pay.total_pay == Decimal("1106.08")
    assert pay.ot_rate == "Regular + OT 1.5 (2.5h @ Rs127)"


def test_longer_lunch_rule_comes_out_of_extended_holiday_hours():
    holidays = [Holiday(MONDAY)]

    pay = _calculator_with_hour_lunch().calculate_shift_pay(
        None, MONDAY, "08:00", "20:00", holidays
    )

    # 4h past the standard day, less dinner and the extra half hour of lunch.
    assert pay.regular_hours == Decimal("0.00")
    assert pay.overtime_hours == Decimal("10.50")
    assert pay.overtime_pay == Decimal("2040.00")
    assert pay.total_pay == Decimal("2190.00")
    assert pay.ot_rate == "OT 2.0+3.0 (7.5h @ Rs170 + 3.0h @ Rs255)"


def test_part_time_weekday_off_sunday_is_ot_1_0(calculator):
    pay = calculator.calculate_shift_pay(
        None, SUNDAY, "09:00", "13:00", part_time_weekday_off=True
    )

    assert pay.overtime_hours == Decimal("3.50")
    assert pay.overtime_pay == Decimal("297.50")
    assert pay.ot_rate == "OT 1.0 (Rs85/hr)"


def test_part_time_flag_ignored_on_public_holiday(calculator):
    holidays = [Holiday(SUNDAY)]

    pay = calculator.calculate_shift_pay(
        None, SUNDAY, "09:00", "13:00", holidays, part_time_weekday_off=True
    )

    assert pay.ot_rate == "OT 2.0 (Rs170/hr)"


def test_disabled_holiday_tiers_pay_raw_hours():
    calculator = _calculator_without_tiers()

    pay = calculator.calculate_shift_pay(None, SUNDAY, "08:00", "16:00")

    assert pay.regular_hours == Decimal("8.00")
    assert pay.regular_pay == Decimal("681.15")
    assert pay.overtime_pay == Decimal("0.00")
    assert pay.ot_rate == "Regular Rate"


def test_disabled_ot_1_5_keeps_long_weekday_at_regular_rate():
    calculator = _calculator_without_tiers()

    pay = calculator.calculate_shift_pay(None, MONDAY, "08:00", "18:00")

    assert pay.regular_hours == Decimal("9.50")
    assert pay.regular_pay == Decimal("808.87")
    assert pay.meal_allowance == Decimal("150.00")
    assert pay.ot_rate == "Regular Rate (OT 1.5 disabled)"


def test_employee_salary_overrides_default(calculator):
    employee = Employee("E1", monthly_salary=Decimal(26000))

    pay = calculator.calculate_shift_pay(employee, MONDAY, "08:00", "16:00")

    assert pay.regular_pay == Decimal("937.50")


@pytest.mark.parametrize(
    ("time_in", "time_out"),
    [("16:00", "08:00"), ("09:00", "09:00"), ("8am", "16:00"), ("08:00", "25:00")],
)
def test_invalid_shift_times(calculator, time_in, time_out):
    with pytest.raises(InvalidShiftError):
        calculator.calculate_shift_pay(None, MONDAY, time_in, time_out)


def test_shift_pay_is_repeatable(calculator):
    first = calculator.calculate_shift_pay(None, SUNDAY, "07:00", "21:00")
    second = calculator.calculate_shift_pay(None, SUNDAY, "07:00", "21:00")

    assert first == second
    assert first.as_dict() == second.as_dict()


def test_total_is_sum_of_rounded_parts(calculator):
    pay = calculator.calculate_shift_pay(None, MONDAY, "08:07", "19:53")

    assert pay.total_pay == pay.regular_pay + pay.overtime_pay + pay.meal_allowance


def test_as_dict_keys(calculator):
    pay = calculator.calculate_shift_pay(None, MONDAY, "08:00", "16:00")

    assert set(pay.as_dict()) == {
        "regularPay",
        "overtimePay",
        "mealAllowance",
        "totalPay",
        "overtimeHours",
        "regularHours",
        "otRate",
    }


def test_overtime_is_capped_when_compliance_enforced(caplog):
    calculator = _compliant_calculator()

    with caplog.at_level(logging.INFO, logger="workforce_payroll"):
        pay = calculator.calculate_shift_pay(None, MONDAY, "08:00", "20:00")

    # Weekly limit of 10h spread over five working days.
    assert pay.overtime_hours == Decimal("2.00")
    assert pay.overtime_pay == Decimal("254.00")
    assert pay.total_pay == Decimal("1042.58")
    assert pay.ot_rate == (
        "Regular + OT 1.5 (4.0h @ Rs127) (Capped: Mauritius limit 10h/week)"
    )
    assert "Capping" in caplog.text


def test_overtime_at_the_cap_is_untouched():
    calculator = _compliant_calculator()

    pay = calculator.calculate_shift_pay(None, MONDAY, "08:00", "18:00")

    assert pay.overtime_hours == Decimal("2.00")
    assert "Capped" not in pay.ot_rate


def test_no_cap_without_compliance(calculator):
    pay = calculator.calculate_shift_pay(None, MONDAY, "08:00", "20:00")

    assert pay.overtime_hours == Decimal("4.00")
    assert pay.overtime_pay == Decimal("508.00")


class TestLeaveDeduction:
    def test_days(self, calculator):
        assert calculator.calculate_leave_deduction(2) == Decimal("1362.31")

    def test_hours(self, calculator):
        assert calculator.calculate_leave_deduction(total_hours=4) == Decimal("340.58")

    def test_hours_win_over_days(self, calculator):
        assert calculator.calculate_leave_deduction(2, 4) == Decimal("340.58")

    def test_nothing_requested(self, calculator):
        assert calculator.calculate_leave_deduction() == Decimal("0.00")
        assert calculator.calculate_leave_deduction(0, 0) == Decimal("0.00")

    def test_employee_salary(self, calculator):
        deduction = calculator.calculate_leave_deduction(
            1, monthly_salary=Decimal(26000)
        )
        assert deduction == Decimal("1000.00")

    def test_allowances_included(self):
        doc = get_baseline_document()
        doc["leaveManagement"]["unpaidLeaveCalculation"]["includeAllowances"] = True
        calculator = PayrollCalculator(CompanyConfiguration.from_document(doc))

        # (17710 + 150 * 26) / 26 * 2
        assert calculator.calculate_leave_deduction(2) == Decimal("1662.31")

    def test_include_overtime_has_no_effect(self):
        doc = get_baseline_document()
        doc["leaveManagement"]["unpaidLeaveCalculation"]["includeOvertime"] = True
        calculator = PayrollCalculator(CompanyConfiguration.from_document(doc))

        assert calculator.calculate_leave_deduction(2) == Decimal("1362.31")


class TestMauritiusContributions:
    def test_disabled_compliance_returns_gross(self, calculator):
        split = calculator.calculate_mauritius_contributions(20000)

        assert split.employee_contributions.total == 0
        assert split.employer_contributions.total == 0
        assert split.net_salary == Decimal(20000)

    def test_employee_and_employer_shares(self):
        calculator = _compliant_calculator(employeeCSG={"enabled": False, "rate": 1})

        split = calculator.calculate_mauritius_contributions(20000)

        employee = split.employee_contributions
        assert employee.npf == Decimal("600.00")
        assert employee.nsf == Decimal("500.00")
        assert employee.csg == Decimal("0.00")
        assert employee.total == Decimal("1100.00")
        employer = split.employer_contributions
        assert employer.npf == Decimal("1200.00")
        assert employer.nsf == Decimal("500.00")
        assert employer.csg == Decimal("400.00")
        assert employer.training_levy == Decimal("300.00")
        assert employer.total == Decimal("2400.00")
        assert split.net_salary == Decimal("18900.00")

    def test_totals_use_unrounded_amounts(self):
        calculator = _compliant_calculator()

        split = calculator.calculate_mauritius_contributions(Decimal("333.33"))

        # 3% + 2.5% + 1% of 333.33 = 21.66645
        assert split.employee_contributions.total == Decimal("21.67")
        assert split.net_salary == Decimal("311.66")

    def test_as_dict_shape(self):
        split = _compliant_calculator().calculate_mauritius_contributions(1000)

        body = split.as_dict()
        assert set(body) == {
            "employeeContributions",
            "employerContributions",
            "netSalary",
        }
        assert "trainingLevy" in body["employerContributions"]
