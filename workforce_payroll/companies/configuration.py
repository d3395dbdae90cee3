"""Typed, immutable view over a company configuration document.

The configuration is stored and exchanged as a camelCase JSON document
(the shape the settings screens edit). Everything that computes pay reads
it through :class:`CompanyConfiguration`, which is built once per document
and never mutated; an edit produces a new document and a new object.
"""

from __future__ import annotations

import dataclasses
import enum
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from decimal import Decimal
from decimal import InvalidOperation
from typing import Any


class ConfigurationError(ValueError):
    """A configuration document cannot be turned into a usable configuration."""


class OvertimeTier(str, enum.Enum):
    OT_1_0 = "ot1_0"
    OT_1_5 = "ot1_5"
    OT_2_0 = "ot2_0"
    OT_3_0 = "ot3_0"

    @property
    def label(self) -> str:
        # ot1_5 -> "OT 1.5"
        return "OT " + self.value[2:].replace("_", ".")


def _key(f: dataclasses.Field) -> str:
    alias = f.metadata.get("key")
    if alias:
        return alias
    head, *rest = f.name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _to_decimal(value: Any, path: str) -> Decimal:
    if isinstance(value, bool):
        msg = f"{path}: expected a number, got {value!r}"
        raise ConfigurationError(msg)
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        msg = f"{path}: expected a number, got {value!r}"
        raise ConfigurationError(msg) from None
    if not number.is_finite():
        msg = f"{path}: expected a finite number, got {value!r}"
        raise ConfigurationError(msg)
    return number


def _to_int(value: Any, path: str) -> int:
    number = _to_decimal(value, path)
    if number != number.to_integral_value():
        msg = f"{path}: expected a whole number, got {value!r}"
        raise ConfigurationError(msg)
    return int(number)


def _convert(hint: Any, value: Any, path: str) -> Any:  # noqa: PLR0911
    origin = typing.get_origin(hint)
    if origin in (typing.Union, types.UnionType):
        if value is None:
            return None
        (inner,) = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        return _convert(inner, value, path)
    if origin is tuple:
        (item_hint, _ellipsis) = typing.get_args(hint)
        if not isinstance(value, list | tuple):
            msg = f"{path}: expected a list"
            raise ConfigurationError(msg)
        return tuple(
            _convert(item_hint, item, f"{path}[{idx}]")
            for idx, item in enumerate(value)
        )
    if hint is Decimal:
        return _to_decimal(value, path)
    if hint is int:
        return _to_int(value, path)
    if hint is bool:
        if not isinstance(value, bool):
            msg = f"{path}: expected true or false, got {value!r}"
            raise ConfigurationError(msg)
        return value
    if hint is str:
        return str(value)
    if origin is dict or hint is dict:
        return dict(value) if isinstance(value, Mapping) else {}
    if isinstance(hint, type) and hasattr(hint, "from_document"):
        return hint.from_document(value, path=path)
    return value


def _dump(value: Any) -> Any:
    if hasattr(value, "to_document"):
        return value.to_document()
    if isinstance(value, Decimal):
        # Whole numbers go out as ints so documents round-trip cleanly.
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, tuple):
        return [_dump(item) for item in value]
    return value


class DocumentSection:
    """Mixin turning a frozen dataclass into a camelCase document section.

    Keys missing from the document fall back to the field defaults; unknown
    keys are ignored.
    """

    @classmethod
    def from_document(cls, doc: Mapping[str, Any] | None, *, path: str = ""):
        if doc is None:
            doc = {}
        if not isinstance(doc, Mapping):
            msg = f"{path or cls.__name__}: expected an object"
            raise ConfigurationError(msg)
        hints = typing.get_type_hints(cls)
        kwargs = {}
        for f in dataclasses.fields(cls):  # type: ignore[arg-type]
            key = _key(f)
            if key not in doc:
                continue
            where = f"{path}.{key}".lstrip(".")
            kwargs[f.name] = _convert(hints[f.name], doc[key], where)
        return cls(**kwargs)

    def to_document(self) -> dict[str, Any]:
        return {
            _key(f): _dump(getattr(self, f.name))
            for f in dataclasses.fields(self)  # type: ignore[arg-type]
        }


@dataclass(frozen=True)
class TimeWindow(DocumentSection):
    start: str = "09:00"
    end: str = "17:00"


@dataclass(frozen=True)
class WorkingSchedule(DocumentSection):
    working_days: tuple[str, ...] = (
        "monday",
        "tuesday",
        "wednesday",
        "thursday",
        "friday",
    )
    working_hours_per_day: Decimal = Decimal(8)
    lunch_break_minutes: Decimal = Decimal(30)
    dinner_break_minutes: Decimal = Decimal(30)
    tea_break_minutes: Decimal = Decimal(15)
    flex_time_allowed: bool = False
    core_working_hours: TimeWindow = field(default_factory=TimeWindow)


@dataclass(frozen=True)
class BaseSalaryStructure(DocumentSection):
    default_monthly_salary: Decimal = Decimal(17710)
    working_days_per_month: Decimal = Decimal(26)
    standard_working_hours: Decimal = Decimal(8)
    currency: str = "MUR"
    currency_symbol: str = "Rs"
    calculation_method: str = "monthly"
    minimum_wage: Decimal | None = None
    salary_review_cycle: str = "annually"

    def __post_init__(self):
        # Both are divisors of the daily/hourly rate.
        if self.working_days_per_month <= 0:
            msg = "baseSalaryStructure.workingDaysPerMonth must be positive"
            raise ConfigurationError(msg)
        if self.standard_working_hours <= 0:
            msg = "baseSalaryStructure.standardWorkingHours must be positive"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class OvertimeTierRule(DocumentSection):
    enabled: bool = True
    rate: Decimal = Decimal(0)
    description: str = ""
    trigger_hours: Decimal = Decimal(0)
    triggers: tuple[str, ...] = ()
    trigger_conditions: tuple[str, ...] = ()
    break_deductions: tuple[str, ...] = ()


_DEFAULT_TIER_RULES = {
    OvertimeTier.OT_1_0: OvertimeTierRule(
        rate=Decimal(85),
        trigger_conditions=("part_time_sunday",),
        break_deductions=("30min lunch",),
        description="Part-time Sunday work",
    ),
    OvertimeTier.OT_1_5: OvertimeTierRule(
        rate=Decimal(127),
        trigger_hours=Decimal(8),
        trigger_conditions=("standard_overtime",),
        break_deductions=("30min lunch",),
        description="Standard overtime",
    ),
    OvertimeTier.OT_2_0: OvertimeTierRule(
        rate=Decimal(170),
        triggers=("weekend", "holiday"),
        trigger_conditions=("weekend", "holiday"),
        break_deductions=("30min lunch",),
        description="Weekend/holiday work",
    ),
    OvertimeTier.OT_3_0: OvertimeTierRule(
        rate=Decimal(255),
        triggers=("extended_weekend", "extended_holiday"),
        trigger_conditions=("extended_weekend", "extended_holiday"),
        break_deductions=("1h total breaks",),
        description="Extended weekend/holiday work",
    ),
}


@dataclass(frozen=True)
class OvertimeRules:
    """The four overtime tiers, always all present."""

    tiers: Mapping[OvertimeTier, OvertimeTierRule] = field(
        default_factory=lambda: dict(_DEFAULT_TIER_RULES)
    )

    def is_enabled(self, tier: OvertimeTier) -> bool:
        return self.tiers[tier].enabled

    def rate(self, tier: OvertimeTier) -> Decimal:
        return self.tiers[tier].rate

    @classmethod
    def from_document(cls, doc: Mapping[str, Any] | None, *, path: str = ""):
        if doc is None:
            doc = {}
        if not isinstance(doc, Mapping):
            msg = f"{path or 'overtimeRules'}: expected an object"
            raise ConfigurationError(msg)
        known = {tier.value for tier in OvertimeTier}
        unknown = sorted(set(doc) - known)
        if unknown:
            msg = f"{path or 'overtimeRules'}: unknown overtime tier(s) {unknown}"
            raise ConfigurationError(msg)
        tiers = {}
        for tier in OvertimeTier:
            if tier.value in doc:
                tiers[tier] = OvertimeTierRule.from_document(
                    doc[tier.value], path=f"{path}.{tier.value}".lstrip(".")
                )
            else:
                tiers[tier] = _DEFAULT_TIER_RULES[tier]
        return cls(tiers=tiers)

    def to_document(self) -> dict[str, Any]:
        return {tier.value: self.tiers[tier].to_document() for tier in OvertimeTier}


@dataclass(frozen=True)
class MealAllowance(DocumentSection):
    enabled: bool = True
    amount: Decimal = Decimal(150)
    minimum_hours: Decimal = Decimal(10)
    description: str = "Meal allowance for extended shifts"
    taxable: bool = False


@dataclass(frozen=True)
class TransportCategory(DocumentSection):
    name: str = ""
    daily_rate: Decimal = Decimal(0)
    description: str = ""


@dataclass(frozen=True)
class TransportAllowance(DocumentSection):
    enabled: bool = False
    categories: tuple[TransportCategory, ...] = ()
    taxi_policy: str = "no_allowance"
    monthly_cap_enabled: bool = False
    monthly_cap: Decimal = Decimal(0)
    gps_mandatory: bool = False
    receipt_required: bool = False


@dataclass(frozen=True)
class LeaveType(DocumentSection):
    id: str = ""
    name: str = ""
    is_paid: bool = True
    requires_approval: bool = True
    allow_partial_day: bool = False
    allow_time_selection: bool = False
    annual_quota: Decimal | None = None
    carry_forward: bool = False
    max_carry_forward_days: Decimal | None = None
    medical_cert_required: Decimal | None = None
    approval_workflow: tuple[str, ...] = ()
    salary_deduction_method: str = "daily_rate"
    color: str = ""
    icon: str = ""
    description: str = ""


@dataclass(frozen=True)
class UnpaidLeaveCalculation(DocumentSection):
    divisor_days: Decimal = Decimal(26)
    include_allowances: bool = False
    # Carried in the document but not applied by the deduction formula.
    include_overtime: bool = False

    def __post_init__(self):
        if self.divisor_days <= 0:
            msg = "leaveManagement.unpaidLeaveCalculation.divisorDays must be positive"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class BlackoutPeriod(DocumentSection):
    start: str = ""
    end: str = ""
    reason: str = ""


@dataclass(frozen=True)
class LeaveManagement(DocumentSection):
    leave_types: tuple[LeaveType, ...] = ()
    unpaid_leave_calculation: UnpaidLeaveCalculation = field(
        default_factory=UnpaidLeaveCalculation
    )
    advance_leave_requests: bool = True
    max_advance_request_days: int = 90
    blackout_periods: tuple[BlackoutPeriod, ...] = ()


@dataclass(frozen=True)
class BreakRule(DocumentSection):
    duration: Decimal = Decimal(30)
    threshold: Decimal = Decimal(8)


@dataclass(frozen=True)
class BreakDeductionRules(DocumentSection):
    lunch: BreakRule = field(default_factory=lambda: BreakRule(Decimal(30), Decimal(8)))
    dinner: BreakRule = field(
        default_factory=lambda: BreakRule(Decimal(30), Decimal(10))
    )
    tea: BreakRule = field(default_factory=lambda: BreakRule(Decimal(15), Decimal(4)))

    @classmethod
    def from_schedule(cls, schedule: WorkingSchedule) -> BreakDeductionRules:
        return cls(
            lunch=BreakRule(schedule.lunch_break_minutes, Decimal(8)),
            dinner=BreakRule(schedule.dinner_break_minutes, Decimal(10)),
            tea=BreakRule(schedule.tea_break_minutes, Decimal(4)),
        )


@dataclass(frozen=True)
class AutoClockOut(DocumentSection):
    enabled: bool = False
    after_hours: Decimal = Decimal(12)


@dataclass(frozen=True)
class AttendanceSettings(DocumentSection):
    geofence_radius: Decimal = Decimal(100)
    late_threshold_minutes: int = 15
    grace_period_minutes: int = 5
    require_photos: bool = False
    allow_manual_override: bool = True
    multiple_check_ins_per_day: bool = False
    auto_clock_out: AutoClockOut = field(default_factory=AutoClockOut)
    # None means "derive from the working schedule".
    break_deduction_rules: BreakDeductionRules | None = None


@dataclass(frozen=True)
class Features(DocumentSection):
    supervisor_roster: bool = False
    field_operations: bool = False
    qr_kiosk: bool = False
    ai_assistant: bool = False
    advanced_reporting: bool = False
    gps_tracking: bool = False
    photographic_verification: bool = False
    shift_swapping: bool = False
    performance_bonuses: bool = False
    mauritius_compliance: bool = False
    custom_fields: bool = False
    bulk_operations: bool = False
    api_access: bool = False
    audit_trail: bool = False


@dataclass(frozen=True)
class ContributionRate(DocumentSection):
    enabled: bool = False
    rate: Decimal = Decimal(0)


def _rate(key: str, default: str):
    return field(
        default_factory=lambda: ContributionRate(enabled=True, rate=Decimal(default)),
        metadata={"key": key},
    )


@dataclass(frozen=True)
class StatutoryContributions(DocumentSection):
    employee_npf: ContributionRate = _rate("employeeNPF", "3.0")
    employee_nsf: ContributionRate = _rate("employeeNSF", "2.5")
    employee_csg: ContributionRate = _rate("employeeCSG", "1.0")
    employer_npf: ContributionRate = _rate("employerNPF", "6.0")
    employer_nsf: ContributionRate = _rate("employerNSF", "2.5")
    employer_csg: ContributionRate = _rate("employerCSG", "2.0")
    training_levy: ContributionRate = _rate("trainingLevy", "1.5")


@dataclass(frozen=True)
class ThirteenthSalary(DocumentSection):
    enabled: bool = True
    payment_month: int = 12
    calculation_base: str = "basic_salary"
    pro_rated: bool = True


@dataclass(frozen=True)
class EndOfYearBonus(DocumentSection):
    enabled: bool = True
    minimum_service_months: int = 12
    calculation_formula: str = "basic_salary / 12"


@dataclass(frozen=True)
class OvertimeLimits(DocumentSection):
    max_overtime_per_week: Decimal = Decimal(10)
    max_overtime_per_month: Decimal = Decimal(60)
    enforce_compliance: bool = True


@dataclass(frozen=True)
class MauritiusSettings(DocumentSection):
    enabled: bool = True
    statutory_contributions: StatutoryContributions = field(
        default_factory=StatutoryContributions
    )
    thirteenth_salary: ThirteenthSalary = field(default_factory=ThirteenthSalary)
    eyb: EndOfYearBonus = field(default_factory=EndOfYearBonus)
    overtime_limits: OvertimeLimits = field(default_factory=OvertimeLimits)


@dataclass(frozen=True)
class Localization(DocumentSection):
    currency: str = "MUR"
    currency_symbol: str = "Rs"
    date_format: str = "DD/MM/YYYY"
    time_format: str = "24h"
    week_start: str = "monday"
    timezone: str = "Indian/Mauritius"
    language: str = "en"
    number_format: str = "US"
    fiscal_year_start: int = 1


@dataclass(frozen=True)
class CompanyConfiguration(DocumentSection):
    """Everything that parameterizes pay for one company."""

    id: str = ""
    company_name: str = ""
    industry: str = "other"
    employee_count: int = 0
    logo: str | None = None
    primary_color: str = "#1f2937"
    address: str = ""
    working_schedule: WorkingSchedule = field(default_factory=WorkingSchedule)
    base_salary_structure: BaseSalaryStructure = field(
        default_factory=BaseSalaryStructure
    )
    overtime_rules: OvertimeRules = field(default_factory=OvertimeRules)
    meal_allowance: MealAllowance = field(default_factory=MealAllowance)
    transport_allowance: TransportAllowance = field(default_factory=TransportAllowance)
    leave_management: LeaveManagement = field(default_factory=LeaveManagement)
    attendance_settings: AttendanceSettings = field(default_factory=AttendanceSettings)
    features: Features = field(default_factory=Features)
    mauritius_settings: MauritiusSettings | None = None
    localization: Localization = field(default_factory=Localization)
    custom_fields: dict = field(default_factory=dict)
    workflows: dict = field(default_factory=dict)
    created_at: str = ""
    updated_at: str = ""
    created_by: str = ""

    @property
    def break_deduction_rules(self) -> BreakDeductionRules:
        rules = self.attendance_settings.break_deduction_rules
        if rules is None:
            return BreakDeductionRules.from_schedule(self.working_schedule)
        return rules

    @property
    def enforces_overtime_limits(self) -> bool:
        return bool(
            self.features.mauritius_compliance
            and self.mauritius_settings is not None
            and self.mauritius_settings.overtime_limits.enforce_compliance
        )

    def to_document(self) -> dict[str, Any]:
        doc = super().to_document()
        for optional in ("logo", "mauritiusSettings"):
            if doc[optional] is None:
                del doc[optional]
        return doc
